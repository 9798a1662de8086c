import copy
import logging

import pytest

from conftest import Group, Point
from json_converter import (
    ClassNotFoundError,
    ConfigurationError,
    JSONConfiguration,
    UnresolvedReferenceError,
    convert_json_tree,
)
from json_converter.conversion import JSONTreeConverter


class TestPrimitivesAndContainers:
    def test_array_without_tags_unchanged(self) -> None:
        result = JSONTreeConverter(JSONConfiguration()).convert([1, "a", True])
        assert result == [1, "a", True]

    @pytest.mark.parametrize("value", [0, 1.5, True, False, None, "text"])
    def test_scalars_returned_unchanged(self, value) -> None:
        assert JSONTreeConverter(JSONConfiguration()).convert(value) == value

    def test_empty_mapping(self) -> None:
        result = JSONTreeConverter(JSONConfiguration()).convert({})
        assert result == {}

    def test_tuple_becomes_list(self) -> None:
        result = JSONTreeConverter(JSONConfiguration()).convert((1, 2))
        assert result == [1, 2]

    def test_nested_plain_containers_are_copied(self) -> None:
        document = {"a": {"b": [1, {"c": 2}]}}
        result = JSONTreeConverter(JSONConfiguration()).convert(document)
        assert result == document
        assert result is not document
        assert result["a"] is not document["a"]


class TestClassInstances:
    def test_type_key_is_stripped(self, configuration: JSONConfiguration) -> None:
        result = JSONTreeConverter(configuration).convert(
            {"type": "Point", "x": 1, "y": 2}
        )
        assert isinstance(result, Point)
        assert result.props == {"x": 1, "y": 2}

    def test_nested_instances_are_built_first(
        self, configuration: JSONConfiguration
    ) -> None:
        result = JSONTreeConverter(configuration).convert(
            {"type": "Group", "children": [{"type": "Point", "x": 0, "y": 0}]}
        )
        assert isinstance(result, Group)
        assert result.children == [Point(x=0, y=0)]

    def test_instance_inside_plain_mapping(
        self, configuration: JSONConfiguration
    ) -> None:
        result = JSONTreeConverter(configuration).convert(
            {"layers": {"origin": {"type": "Point", "x": 0, "y": 0}}}
        )
        assert result == {"layers": {"origin": Point(x=0, y=0)}}

    @pytest.mark.parametrize("tag", ["", None, 0, False])
    def test_falsy_type_tag_is_plain_mapping(
        self, configuration: JSONConfiguration, tag
    ) -> None:
        result = JSONTreeConverter(configuration).convert({"type": tag, "x": 1})
        assert result == {"type": tag, "x": 1}

    def test_custom_type_key(self) -> None:
        config = JSONConfiguration(type_key="@@type", classes={"Point": Point})
        result = JSONTreeConverter(config).convert(
            {"@@type": "Point", "type": "cartesian"}
        )
        assert result.props == {"type": "cartesian"}

    def test_props_are_converted(self, configuration: JSONConfiguration) -> None:
        result = JSONTreeConverter(configuration).convert(
            {"type": "Point", "x": "@@#PI", "color": "@@#Color.RED"}
        )
        assert result.props == {"x": 3.14, "color": "#f00"}

    def test_unregistered_class(self, configuration: JSONConfiguration) -> None:
        with pytest.raises(ClassNotFoundError, match="Unknown"):
            JSONTreeConverter(configuration).convert({"type": "Unknown"})


class TestStrings:
    def test_function_tag(self) -> None:
        config = JSONConfiguration(
            convert_function=lambda name, key, configuration: "CALLED:" + name
        )
        result = JSONTreeConverter(config).convert({"cb": "@@=foo"})
        assert result == {"cb": "CALLED:foo"}

    def test_function_tag_without_resolver(self) -> None:
        result = JSONTreeConverter(JSONConfiguration()).convert({"cb": "@@=foo"})
        assert result == {"cb": "@@=foo"}

    def test_keys_passed_to_function_resolution(self) -> None:
        keys = []

        def convert_function(name, key, configuration):
            keys.append(key)
            return name

        config = JSONConfiguration(convert_function=convert_function)
        JSONTreeConverter(config).convert({"handlers": ["@@=a", "@@=b"], "c": "@@=c"})
        assert keys == ["0", "1", "c"]

    def test_root_key_is_empty(self) -> None:
        keys = []
        config = JSONConfiguration(
            convert_function=lambda name, key, configuration: keys.append(key)
        )
        JSONTreeConverter(config).convert("@@=root")
        assert keys == [""]

    def test_constant_at_root(self, configuration: JSONConfiguration) -> None:
        assert JSONTreeConverter(configuration).convert("@@#PI") == 3.14

    def test_unresolved_enum_aborts(self, configuration: JSONConfiguration) -> None:
        with pytest.raises(UnresolvedReferenceError):
            JSONTreeConverter(configuration).convert(
                {"ok": "@@#PI", "bad": ["@@#Color.BLUE"]}
            )


class TestPurity:
    def test_input_not_mutated(self, configuration: JSONConfiguration) -> None:
        document = {
            "type": "Group",
            "children": [{"type": "Point", "x": "@@#PI", "y": 0}],
            "meta": {"color": "@@#Color.RED"},
        }
        snapshot = copy.deepcopy(document)

        JSONTreeConverter(configuration).convert(document)

        assert document == snapshot

    def test_plain_object_requires_mapping(self) -> None:
        converter = JSONTreeConverter(JSONConfiguration())
        with pytest.raises(ConfigurationError):
            converter._convert_plain_object(["not", "a", "mapping"])


def test_convert_json_tree_applies_post_processing() -> None:
    config = JSONConfiguration(
        post_process_converted_json=lambda converted: {"wrapped": converted}
    )
    assert convert_json_tree([1], config) == {"wrapped": [1]}


class TestLogging:
    def test_string_resolution_logs_under_given_logger(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="host")
        config = JSONConfiguration(
            convert_function=lambda name, key, configuration: name
        )
        JSONTreeConverter(config, logger=logging.getLogger("host")).convert(
            {"cb": "@@=foo"}
        )

        records = [r for r in caplog.records if "Resolving function" in r.getMessage()]
        assert [r.name for r in records] == ["host.strings"]

    def test_warn_policy_tolerates_non_string_keys(self) -> None:
        config = JSONConfiguration(on_unregistered_class="warn")
        assert JSONTreeConverter(config).convert({"type": "X", (1, 2): 3}) is None
