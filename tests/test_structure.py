"""
Structure lint tests.
Verify that the colors component follows the component skeleton.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
COMPONENT_DIR = PROJECT_ROOT / "src" / "components" / "colors"


class TestProjectStructure:
    """Verify project structure follows component conventions."""

    def test_component_files_exist(self) -> None:
        """Component must split models, ports, entry points and service."""
        for name in ["__init__.py", "models.py", "ports.py", "component.py", "_impl.py"]:
            assert (COMPONENT_DIR / name).is_file(), f"Missing {name}"

    def test_adapters_directory_exists(self) -> None:
        assert (COMPONENT_DIR / "adapters" / "__init__.py").is_file()

    def test_component_tests_exist(self) -> None:
        assert (COMPONENT_DIR / "tests" / "test_unit.py").is_file()

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests").is_dir()
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()

    def test_rules_file_exists(self) -> None:
        assert (PROJECT_ROOT / "color_rules.yaml").is_file()
