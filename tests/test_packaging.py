"""
Tests for the project metadata.
"""

import re
from pathlib import Path


ROOT = Path(__file__).parent.parent


class TestPyproject:
    """Test cases for pyproject.toml."""

    def test_readme_is_user_facing(self):
        """Test that the package description is the README, and that it exists."""
        text = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
        match = re.search(r'^readme = "([^"]+)"$', text, flags=re.MULTILINE)

        assert match is not None
        assert match.group(1) == "README.md"
        assert (ROOT / "README.md").is_file()
