"""Unit tests for canonical component paths."""

import pytest

from componentry import Component
from componentry.contexts.templating.naming import canonical_path
from componentry.utils.text_processing import strip_suffix, underscore


@pytest.mark.unit
class TestUnderscore:
    """Test CamelCase to snake_case conversion."""

    def test_simple_words(self):
        """Should split words at capitals."""
        assert underscore("UserProfile") == "user_profile"
        assert underscore("Users") == "users"

    def test_acronyms(self):
        """Should keep runs of capitals together."""
        assert underscore("HTMLWidget") == "html_widget"
        assert underscore("APIKeyList") == "api_key_list"

    def test_digits_and_dashes(self):
        """Should split after digits and turn dashes into underscores."""
        assert underscore("Report2Pdf") == "report2_pdf"
        assert underscore("side-bar") == "side_bar"

    def test_already_snake_case(self):
        """Should leave snake_case input alone."""
        assert underscore("already_snake") == "already_snake"


@pytest.mark.unit
class TestStripSuffix:
    """Test case-sensitive suffix removal."""

    def test_strips_matching_suffix(self):
        assert strip_suffix("UsersComponent", "Component") == "Users"

    def test_case_sensitive(self):
        """Should not strip a suffix with different case."""
        assert strip_suffix("Userscomponent", "Component") == "Userscomponent"

    def test_keeps_text_equal_to_suffix(self):
        """Should never produce an empty name."""
        assert strip_suffix("Component", "Component") == "Component"


@pytest.mark.unit
def test_canonical_path_strips_component_suffix():
    """Test that the Component suffix is dropped before underscoring."""

    class UserProfileComponent(Component):
        pass

    assert canonical_path(UserProfileComponent) == "user_profile"
    assert UserProfileComponent.component_name == "user_profile"


@pytest.mark.unit
def test_canonical_path_without_suffix():
    """Test classes that do not follow the suffix convention."""

    class Sidebar(Component):
        pass

    assert canonical_path(Sidebar) == "sidebar"


@pytest.mark.unit
def test_canonical_path_of_root():
    """Test that the root class keeps its full name."""
    assert canonical_path(Component) == "component"


@pytest.mark.unit
def test_canonical_path_is_memoized():
    """Test that renaming a class after first use does not change its path."""

    class UsersComponent(Component):
        pass

    first = canonical_path(UsersComponent)
    UsersComponent.__name__ = "AccountsComponent"

    assert canonical_path(UsersComponent) == first == "users"


@pytest.mark.unit
def test_canonical_path_not_inherited():
    """Test that a subclass computes its own path after its parent."""

    class UsersComponent(Component):
        pass

    class AdminUsersComponent(UsersComponent):
        pass

    assert canonical_path(UsersComponent) == "users"
    assert canonical_path(AdminUsersComponent) == "admin_users"
