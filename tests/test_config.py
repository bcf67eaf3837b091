"""Tests for config loading, paths and error formatting."""

from pathlib import Path

import pytest

from selectctl.config import (
    Config,
    ConfigError,
    load_config,
    load_yaml,
    split_codes,
    validate_config,
)
from selectctl.context import SelectionContext
from selectctl.errors import (
    ErrorKind,
    format_error,
    format_field_error,
    format_suggestion,
    not_found,
)
from selectctl.paths import (
    get_catalog_path,
    get_config_dir,
    get_config_path,
    get_packaged_catalog_path,
)

from .conftest import FakeClient


class TestValidateConfig:
    def test_empty_document(self):
        assert validate_config(None) == Config()

    def test_all_fields(self):
        config = validate_config(
            {
                "organization": "acme",
                "region": "ord",
                "vm_size": "shared-cpu-1x",
                "regions": ["ams", "cdg"],
                "catalog": "~/catalog.yaml",
            }
        )
        assert config.organization == "acme"
        assert config.region == "ord"
        assert config.vm_size == "shared-cpu-1x"
        assert config.regions == ("ams", "cdg")
        assert config.catalog == "~/catalog.yaml"

    def test_regions_comma_separated(self):
        assert validate_config({"regions": "ams, cdg"}).regions == ("ams", "cdg")

    def test_regions_must_be_strings(self):
        with pytest.raises(ConfigError, match="config field 'regions' must be a list of strings"):
            validate_config({"regions": ["ams", 3]})

    def test_empty_string_rejected(self):
        with pytest.raises(ConfigError, match="config field 'region' must be a non-empty string"):
            validate_config({"region": "  "})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            validate_config(["acme"])

    def test_unknown_field(self):
        with pytest.raises(ConfigError, match="Unknown config field"):
            validate_config({"orgnization": "acme"})


class TestLoadConfig:
    def test_missing_file_is_empty(self, temp_dir):
        assert load_config(temp_dir / "config.yaml") == Config()

    def test_load_file(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("organization: acme\nregion: ord\n")
        assert load_config(path) == Config(organization="acme", region="ord")

    def test_syntax_error_has_position(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("organization: acme\nregion: [ord\n")
        with pytest.raises(ConfigError, match="line"):
            load_config(path)

    def test_directory_rejected(self, temp_dir):
        with pytest.raises(ConfigError, match="not a file"):
            load_config(temp_dir)

    def test_load_yaml_rejects_other_types(self):
        with pytest.raises(TypeError):
            load_yaml(42)


class TestConfigMerge:
    def test_flags_override_file(self):
        config = Config(organization="acme", region="ord")
        merged = config.merged(organization="other", region=None)
        assert merged.organization == "other"
        assert merged.region == "ord"

    def test_regions_override(self):
        merged = Config(regions=("ams",)).merged(regions=["cdg", "nrt"])
        assert merged.regions == ("cdg", "nrt")

    def test_empty_regions_keep_file_value(self):
        assert Config(regions=("ams",)).merged(regions=()).regions == ("ams",)

    def test_to_dict_drops_empty(self):
        assert Config(region="ord", regions=("ams",)).to_dict() == {
            "region": "ord",
            "regions": ["ams"],
        }

    def test_split_codes(self):
        assert split_codes("ord, ams,,cdg ") == ("ord", "ams", "cdg")


class TestSelectionContext:
    def test_from_config(self, pipe_session):
        client = FakeClient()
        config = Config(organization="acme", region="ord", vm_size="x", regions=("ams",))
        ctx = SelectionContext.from_config(pipe_session, client, config)
        assert ctx.organization == "acme"
        assert ctx.region == "ord"
        assert ctx.vm_size == "x"
        assert ctx.regions == ("ams",)
        assert ctx.client is client

    def test_is_immutable(self, pipe_session):
        ctx = SelectionContext(pipe_session, FakeClient())
        with pytest.raises(AttributeError):
            ctx.region = "ord"


class TestPaths:
    def test_default_config_path(self, monkeypatch):
        monkeypatch.delenv("SELECTCTL_CONFIG", raising=False)
        assert get_config_path() == get_config_dir() / "config.yaml"

    def test_env_config_path(self, monkeypatch, temp_dir):
        monkeypatch.setenv("SELECTCTL_CONFIG", str(temp_dir / "c.yaml"))
        assert get_config_path() == temp_dir / "c.yaml"

    def test_catalog_priority(self, monkeypatch, temp_dir):
        monkeypatch.setenv("SELECTCTL_CATALOG", str(temp_dir / "env.yaml"))
        assert get_catalog_path("flag.yaml", "conf.yaml") == Path("flag.yaml")
        assert get_catalog_path(None, "conf.yaml") == temp_dir / "env.yaml"
        monkeypatch.delenv("SELECTCTL_CATALOG")
        assert get_catalog_path(None, "conf.yaml") == Path("conf.yaml")

    def test_catalog_falls_back_to_packaged(self, monkeypatch, temp_dir):
        monkeypatch.delenv("SELECTCTL_CATALOG", raising=False)
        monkeypatch.setattr("selectctl.paths.get_config_dir", lambda: temp_dir)
        assert get_catalog_path() == get_packaged_catalog_path()
        (temp_dir / "catalog.yaml").write_text("{}\n")
        assert get_catalog_path() == temp_dir / "catalog.yaml"


class TestErrorFormatting:
    def test_format_error(self):
        assert format_error("region xyz not found") == "Error: region xyz not found"

    def test_format_field_error(self):
        assert format_field_error("config", "region", "is required") == (
            "config field 'region' is required"
        )

    def test_format_suggestion(self):
        assert format_suggestion("vm size required", "pass --vm-size") == (
            "Error: vm size required. Hint: pass --vm-size"
        )

    def test_not_found(self):
        error = not_found("vm size", "huge")
        assert error.kind is ErrorKind.NOT_FOUND
        assert error.message == "vm size huge not found"
