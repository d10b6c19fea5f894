# tests/unit/application/processing/test_path_properties.py

"""Property-based tests for path parsing and path access

These tests verify that parsing, formatting, reading and writing keep their
invariants across generated paths and documents.
"""

# Standard library imports
from copy import deepcopy

# Third party imports
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.strategies import composite

# Local imports
from workspace_config_tool.application.processing.path_accessor import get_at_path
from workspace_config_tool.application.processing.path_accessor import set_at_path
from workspace_config_tool.application.processing.path_parser import format_path
from workspace_config_tool.application.processing.path_parser import parse_path
from workspace_config_tool.core.domain.enums import NOT_FOUND
from workspace_config_tool.core.domain.errors import PathSyntaxError
from workspace_config_tool.core.domain.path_step import IndexStep
from workspace_config_tool.core.domain.path_step import KeyStep

keys = st.text(
    alphabet=st.characters(exclude_characters=".[]", exclude_categories=("Cs",)),
    min_size=1,
    max_size=8,
)
indices = st.integers(min_value=0, max_value=6)
steps = st.one_of(keys.map(KeyStep), indices.map(IndexStep))

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=10),
)
json_values = st.recursive(
    json_scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(st.text(max_size=6), children, max_size=4),
    ),
    max_leaves=12,
)


@composite
def path_strings(draw: st.DrawFn) -> str:
    """Generate syntactically valid path expressions, including odd dot usage"""
    segments = []
    for _ in range(draw(st.integers(min_value=0, max_value=5))):
        name = draw(st.one_of(st.just(""), keys))
        brackets = "".join(f"[{i}]" for i in draw(st.lists(indices, max_size=3)))
        segments.append(name + brackets)
    return ".".join(segments)


class TestParserProperties:
    """Invariants of parse_path and format_path"""

    @given(path_strings())
    def test_parse_is_deterministic(self, path: str) -> None:
        assert parse_path(path) == parse_path(path)

    @given(path_strings())
    def test_canonical_form_reparses_to_same_steps(self, path: str) -> None:
        parsed = parse_path(path)
        assert parse_path(format_path(parsed)) == parsed

    @given(st.lists(steps, max_size=8))
    def test_format_then_parse_round_trips(self, path: list) -> None:
        assert parse_path(format_path(path)) == path

    @given(st.text(max_size=20))
    def test_parse_never_fails_unexpectedly(self, path: str) -> None:
        """Any text either parses or raises PathSyntaxError"""
        try:
            result = parse_path(path)
        except PathSyntaxError:
            return
        assert all(isinstance(step, (KeyStep, IndexStep)) for step in result)


class TestAccessorProperties:
    """Invariants of get_at_path and set_at_path"""

    @given(json_values)
    def test_empty_path_returns_root(self, root) -> None:
        assert get_at_path(root, []) is root

    @given(json_values, st.lists(steps, min_size=1, max_size=6), json_values)
    def test_write_then_read(self, root, path, value) -> None:
        """Whenever a write succeeds, reading the same path gives the value back"""
        if set_at_path(root, path, value) is not NOT_FOUND:
            assert get_at_path(root, path) == value

    @given(st.lists(steps, min_size=1, max_size=6), json_scalars)
    def test_write_into_empty_mapping(self, path, value) -> None:
        """Paths starting with a key can always be built from nothing"""
        path = [KeyStep("root"), *path]
        root: dict = {}
        assert set_at_path(root, path, value) is root
        assert get_at_path(root, path) == value

    @given(json_values, st.lists(steps, min_size=1, max_size=6), json_values)
    def test_failed_write_leaves_document_unchanged(self, root, path, value) -> None:
        before = deepcopy(root)
        if set_at_path(root, path, value) is NOT_FOUND:
            assert root == before

    @given(json_values, st.lists(steps, max_size=6))
    def test_get_never_modifies(self, root, path) -> None:
        before = deepcopy(root)
        get_at_path(root, path)
        assert root == before
