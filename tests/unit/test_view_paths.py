"""Unit tests for per-class template search roots."""

from pathlib import Path

import pytest

from componentry import Component


@pytest.mark.unit
def test_view_paths_read_twice_is_same_list():
    """Test that defaulting happens once and later reads return the same list."""

    class UsersComponent(Component):
        pass

    first = UsersComponent.view_paths
    second = UsersComponent.view_paths

    assert first is second
    assert first == list(Component.view_paths)


@pytest.mark.unit
def test_view_paths_default_to_components_root():
    """Test that the root class starts from the conventional components directory."""
    assert isinstance(Component.view_paths[0], Path)


@pytest.mark.unit
def test_declared_view_paths(tmp_path):
    """Test that a class body can declare its own search roots."""

    class UsersComponent(Component):
        view_paths = [tmp_path, str(tmp_path / "vendor")]

    assert UsersComponent.view_paths == [tmp_path, tmp_path / "vendor"]


@pytest.mark.unit
def test_subclass_copies_parent_view_paths(tmp_path):
    """Test that a subclass starts from a copy of its parent's roots."""

    class UsersComponent(Component):
        view_paths = [tmp_path]

    class AdminUsersComponent(UsersComponent):
        pass

    assert AdminUsersComponent.view_paths == [tmp_path]
    assert AdminUsersComponent.view_paths is not UsersComponent.view_paths


@pytest.mark.unit
def test_registered_view_path_visible_to_all_instances(tmp_path):
    """Test that a plugin appending a root affects every reader of the class."""

    class UsersComponent(Component):
        view_paths = [tmp_path]

    plugin_root = tmp_path / "plugins" / "scaffolding" / "components"
    UsersComponent.view_paths.append(plugin_root)

    assert UsersComponent.view_paths == [tmp_path, plugin_root]
    assert type(UsersComponent()).view_paths[-1] == plugin_root
