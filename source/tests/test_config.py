# ABOUTME: Tests for sync configuration loading and validation
# ABOUTME: Covers plugin-style keys, profiles, environment overrides and missing fields

import json

import pytest
from conftest import PARAMETER_NAME, USER_POOL_ID

from cognito_ssm_sync.config import Config, SyncConfig, env_overrides, load_sync_config
from cognito_ssm_sync.errors import ConfigurationError


class TestSyncConfig:
    def test_from_dict_accepts_plugin_keys(self):
        config = SyncConfig.from_dict(
            {"userPoolId": USER_POOL_ID, "appClientName": "MyService", "parameterName": PARAMETER_NAME, "extra": 1}
        )

        assert config.user_pool_id == USER_POOL_ID
        assert config.app_client_name == "MyService"
        assert config.parameter_name == PARAMETER_NAME
        assert config.secure is True

    def test_validate_lists_every_missing_field(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SyncConfig(app_client_name="MyService").validate()

        assert exc_info.value.missing_fields == ["user_pool_id", "parameter_name"]

    def test_validate_accepts_complete_config(self, sync_config):
        sync_config.validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"user_pool_id": "not-a-pool"},
            {"parameter_name": "aws/reserved"},
            {"region": "moon-base"},
            {"tier": "Premium"},
        ],
    )
    def test_validate_rejects_malformed_values(self, sync_config, overrides):
        with pytest.raises(ConfigurationError):
            sync_config.with_overrides(**overrides).validate()

    def test_with_overrides_ignores_none(self, sync_config):
        updated = sync_config.with_overrides(app_client_name=None, dry_run=True)

        assert updated.app_client_name == "myservice"
        assert updated.dry_run is True
        assert sync_config.dry_run is False


class TestConfigFile:
    def _write(self, tmp_path, data) -> str:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        return str(path)

    def test_single_profile_becomes_default(self, tmp_path):
        path = self._write(tmp_path, {"profiles": {"prod": {"userPoolId": USER_POOL_ID}}})

        config = Config.load(path)

        assert config.list_profiles() == ["prod"]
        assert config.get_profile().user_pool_id == USER_POOL_ID

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.load(tmp_path / "nope.json")

    def test_missing_default_file_is_empty(self):
        assert Config.load().list_profiles() == []

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{")

        with pytest.raises(ConfigurationError):
            Config.load(path)


class TestLoadSyncConfig:
    def test_precedence(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "default_profile": "dev",
                    "profiles": {
                        "dev": {"user_pool_id": USER_POOL_ID, "app_client_name": "from-file", "region": "eu-west-1"}
                    },
                }
            )
        )
        monkeypatch.setenv("COGNITO_SSM_SYNC_APP_CLIENT_NAME", "from-env")
        monkeypatch.setenv("COGNITO_SSM_SYNC_PARAMETER_NAME", "/from/env")

        config = load_sync_config(path, parameter_name="/from/cli")

        assert config.user_pool_id == USER_POOL_ID
        assert config.app_client_name == "from-env"
        assert config.parameter_name == "/from/cli"
        assert config.region == "eu-west-1"

    def test_unknown_profile(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_sync_config(profile="staging")

        assert "staging" in exc_info.value.message

    def test_env_overrides_ignores_empty_values(self):
        assert env_overrides({"COGNITO_SSM_SYNC_REGION": "", "COGNITO_SSM_SYNC_USER_POOL_ID": "x"}) == {
            "user_pool_id": "x"
        }
