import json
import os.path

import pydantic
import pytest

from typewiring.core.exceptions import DuplicateBindingError, WiringConfigError
from typewiring.core.strict_mode import set_default_strict_mode
from typewiring.models.wiring_config import TypeWiringConfig, WiringConfig
from typewiring.wiring.enum_values import MappingEnumValuesProvider
from typewiring.wiring.loader import (
    build_type_wiring,
    import_object,
    load_type_wirings,
    load_wiring_config,
)


def setup_function() -> None:
    set_default_strict_mode(True)


def teardown_function() -> None:
    set_default_strict_mode(True)


PET_CONFIG = {
    "types": [
        {
            "type_name": "Pet",
            "field_resolvers": {"name": "json:dumps", "path": "os.path.join"},
            "default_resolver": "builtins:repr",
        },
        {
            "type_name": "Color",
            "enum_values": {"RED": "r", "GREEN": "g"},
        },
    ]
}


def test_import_object_supports_colon_and_dot_forms():
    assert import_object("json:dumps") is json.dumps
    assert import_object("os.path.join") is os.path.join
    assert import_object("os:path.join") is os.path.join


@pytest.mark.parametrize("reference", ["", "nodots", "no_such_module_xyz:thing", "json:no_such_attr"])
def test_import_object_errors(reference):
    with pytest.raises(WiringConfigError):
        import_object(reference)


def test_load_type_wirings_from_dict():
    pet, color = load_type_wirings(config_dict=PET_CONFIG)

    assert pet.type_name == "Pet"
    assert dict(pet.field_resolvers) == {"name": json.dumps, "path": os.path.join}
    assert pet.default_resolver is repr
    assert pet.type_discriminator is None

    assert color.type_name == "Color"
    assert isinstance(color.enum_value_mapping, MappingEnumValuesProvider)
    assert color.enum_value_mapping.get_value("RED") == "r"


def test_load_type_wirings_from_json_file(tmp_path):
    path = tmp_path / "wiring.json"
    path.write_text(json.dumps(PET_CONFIG))

    wirings = load_type_wirings(config_path=str(path))

    assert [w.type_name for w in wirings] == ["Pet", "Color"]


def test_load_wiring_config_from_yaml_file(tmp_path):
    path = tmp_path / "wiring.yaml"
    path.write_text(
        "strict_mode: false\n"
        "types:\n"
        "  - type_name: Node\n"
        "    type_discriminator: builtins:type\n"
    )

    config = load_wiring_config(config_path=str(path))

    assert config.strict_mode is False
    assert config.type_names() == ["Node"]
    (node,) = load_type_wirings(config_path=str(path))
    assert node.type_discriminator is type


def test_load_wiring_config_errors(tmp_path):
    with pytest.raises(ValueError, match="Either config_path or config_dict"):
        load_wiring_config()

    with pytest.raises(FileNotFoundError):
        load_wiring_config(config_path=str(tmp_path / "missing.json"))

    bad = tmp_path / "wiring.toml"
    bad.write_text("")
    with pytest.raises(ValueError, match="Unsupported config format"):
        load_wiring_config(config_path=str(bad))


def test_config_rejects_unknown_keys_and_empty_type_name():
    with pytest.raises(pydantic.ValidationError):
        WiringConfig.model_validate({"types": [{"type_name": "Pet", "resolvers": {}}]})

    with pytest.raises(pydantic.ValidationError):
        TypeWiringConfig(type_name="")


def test_config_rejects_both_enum_sources():
    with pytest.raises(pydantic.ValidationError, match="mutually exclusive"):
        TypeWiringConfig(
            type_name="Color",
            enum_values={"RED": 1},
            enum_values_provider="builtins:dict",
        )


def test_enum_values_provider_reference_is_imported():
    cfg = TypeWiringConfig(type_name="Color", enum_values_provider="builtins:dict")

    assert build_type_wiring(cfg).enum_value_mapping is dict


def test_strict_mode_precedence(monkeypatch):
    import typewiring.wiring.loader as loader_mod

    seen = []
    original = loader_mod.TypeWiringBuilder

    class RecordingBuilder(original):
        def build(self):
            seen.append(self.strict_mode)
            return super().build()

    monkeypatch.setattr(loader_mod, "TypeWiringBuilder", RecordingBuilder)
    cfg = TypeWiringConfig(type_name="Pet")

    build_type_wiring(cfg)
    build_type_wiring(cfg, strict_mode=False)
    build_type_wiring(cfg.model_copy(update={"strict_mode": True}), strict_mode=False)
    set_default_strict_mode(False)
    build_type_wiring(cfg)

    assert seen == [True, False, True, False]


def test_json_file_with_repeated_field_is_rejected(tmp_path):
    path = tmp_path / "wiring.json"
    path.write_text(
        '{"types": [{"type_name": "Pet", '
        '"field_resolvers": {"name": "json:dumps", "name": "builtins:repr"}}]}'
    )

    with pytest.raises(DuplicateBindingError, match="name") as exc_info:
        load_type_wirings(config_path=str(path))

    assert exc_info.value.field_name == "name"


def test_yaml_file_with_repeated_field_is_rejected(tmp_path):
    path = tmp_path / "wiring.yaml"
    path.write_text(
        "types:\n"
        "  - type_name: Pet\n"
        "    field_resolvers:\n"
        "      name: json:dumps\n"
        "      name: builtins:repr\n"
    )

    with pytest.raises(DuplicateBindingError, match="name") as exc_info:
        load_type_wirings(config_path=str(path))

    assert exc_info.value.field_name == "name"


def test_yaml_merge_key_may_be_overridden(tmp_path):
    path = tmp_path / "wiring.yaml"
    path.write_text(
        "types:\n"
        "  - &pet\n"
        "    type_name: Pet\n"
        "    default_resolver: builtins:repr\n"
        "  - <<: *pet\n"
        "    type_name: Cat\n"
    )

    pet, cat = load_type_wirings(config_path=str(path))
    assert pet.type_name == "Pet"
    assert pet.default_resolver is repr
    assert cat.type_name == "Cat"
    assert cat.default_resolver is repr
