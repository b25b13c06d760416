"""Tests for the config command group."""

import json

from typer.testing import CliRunner

from cos_tools.cli import app
from cos_tools.core.plugin_config import (
    ACCESS_KEY_ID,
    CRN,
    DEFAULT_REGION,
    DOWNLOAD_LOCATION,
    FORCE_PATH_STYLE,
    HMAC_PROVIDED,
    LAST_UPDATED,
    PROFILE,
    SECRET_ACCESS_KEY,
    SERVICE_ENDPOINT,
)

runner = CliRunner()


def config(*args):
    return runner.invoke(app, ["config", *args])


def stored(config_file):
    return json.loads(config_file.read_text())


class TestConfigList:
    """Test the configuration table."""

    def test_defaults(self):
        result = config("list")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["Key", "Value"]
        assert any(line.startswith("Authentication Method") and line.endswith("IAM") for line in lines)
        assert any(line.startswith("URL Style") and line.endswith("VHost") for line in lines)

    def test_secret_is_masked(self, write_config):
        write_config({ACCESS_KEY_ID: "key", SECRET_ACCESS_KEY: "secret", HMAC_PROVIDED: True})

        result = config("list")

        assert "secret" not in result.output
        assert "******" in result.output
        assert any(
            line.startswith("Authentication Method") and line.endswith("HMAC")
            for line in result.output.splitlines()
        )

    def test_wrong_type_is_flagged(self, write_config):
        write_config({FORCE_PATH_STYLE: "yes"})

        result = config("list")

        assert "-INVALID-" in result.output

    def test_unreadable_file(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{broken")

        result = config("list")

        assert result.exit_code == 1
        assert "FAILED" in result.output


class TestConfigRegion:
    """Test storing the default region."""

    def test_set_region(self, config_file):
        result = config("region", "--region", "eu-de")

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "OK"
        assert "in the region eu-de." in result.output
        assert stored(config_file)[DEFAULT_REGION] == "eu-de"
        assert LAST_UPDATED in stored(config_file)

    def test_region_required(self, config_file):
        result = config("region")

        assert result.exit_code == 1
        assert "A region is required" in result.output
        assert not config_file.exists()

    def test_list_region(self, write_config):
        write_config({DEFAULT_REGION: "jp-tok"})

        result = config("region", "--list")

        assert "jp-tok" in result.output


class TestConfigCredentials:
    """Test HMAC keys and the authentication switch."""

    def test_store_hmac(self, config_file):
        result = config("hmac", "--access-key-id", "key", "--secret-access-key", "secret")

        assert result.exit_code == 0
        assert "Successfully saved HMAC Credentials to file." in result.output
        assert stored(config_file)[ACCESS_KEY_ID] == "key"
        assert stored(config_file)[SECRET_ACCESS_KEY] == "secret"

    def test_hmac_requires_both_keys(self, config_file):
        result = config("hmac", "--access-key-id", "key")

        assert result.exit_code == 1
        assert "Both --access-key-id and --secret-access-key are required." in result.output

    def test_switch_to_hmac_without_keys(self, config_file):
        result = config("auth", "--method", "HMAC")

        assert result.exit_code == 1
        assert "No HMAC credentials are stored" in result.output
        assert not config_file.exists()

    def test_switch_to_hmac_case_insensitive(self, write_config, config_file):
        write_config({ACCESS_KEY_ID: "key", SECRET_ACCESS_KEY: "secret"})

        result = config("auth", "--method", "hmac")

        assert result.exit_code == 0
        assert "Successfully switched to HMAC-based authentication." in result.output
        assert stored(config_file)[HMAC_PROVIDED] is True

    def test_switch_to_hmac_with_malformed_keys(self, write_config, config_file):
        write_config({ACCESS_KEY_ID: 5, SECRET_ACCESS_KEY: "secret"})

        result = config("auth", "--method", "HMAC")

        assert result.exit_code == 1
        assert "FAILED" in result.output
        assert HMAC_PROVIDED not in stored(config_file)

    def test_switch_back_to_iam(self, write_config, config_file):
        write_config({HMAC_PROVIDED: True})

        result = config("auth", "--method", "IAM")

        assert result.exit_code == 0
        assert stored(config_file)[HMAC_PROVIDED] is False

    def test_invalid_method(self):
        result = config("auth", "--method", "token")

        assert result.exit_code == 1
        assert "Invalid authentication method 'token'" in result.output


class TestConfigEndpoint:
    """Test URL style, endpoint and profile settings."""

    def test_path_style(self, config_file):
        result = config("url-style", "--style", "path")

        assert result.exit_code == 0
        assert "Successfully switched to Path URL style." in result.output
        assert stored(config_file)[FORCE_PATH_STYLE] is True

    def test_invalid_style(self):
        result = config("url-style", "--style", "subdomain")

        assert result.exit_code == 1
        assert "Invalid URL style 'subdomain'" in result.output

    def test_set_and_clear_endpoint(self, config_file):
        url = "https://s3.{region}.example.com"

        set_result = config("endpoint-url", "--url", url)
        assert set_result.exit_code == 0
        assert stored(config_file)[SERVICE_ENDPOINT] == url

        clear_result = config("endpoint-url", "--clear")
        assert clear_result.exit_code == 0
        assert "Successfully cleared service endpoint URL." in clear_result.output
        assert SERVICE_ENDPOINT not in stored(config_file)

    def test_endpoint_needs_exactly_one_option(self):
        neither = config("endpoint-url")
        both = config("endpoint-url", "--url", "https://x", "--clear")

        assert neither.exit_code == 1
        assert both.exit_code == 1
        assert "Pass exactly one of --url or --clear." in both.output

    def test_profile(self, config_file):
        saved = config("profile", "--name", "research")
        assert saved.exit_code == 0
        assert "Successfully saved credential profile 'research'." in saved.output
        assert stored(config_file)[PROFILE] == "research"

        cleared = config("profile", "--clear")
        assert cleared.exit_code == 0
        assert PROFILE not in stored(config_file)


class TestConfigInstanceAndDownloads:
    """Test the service instance ID and the download location."""

    def test_store_and_clear_crn(self, config_file):
        saved = config("crn", "--crn", "crn:v1:bluemix:public:cloud-object-storage:global:a/1::")
        assert saved.exit_code == 0
        assert "Successfully stored your service instance ID." in saved.output
        assert stored(config_file)[CRN].startswith("crn:v1:")

        listed = config("crn", "--list")
        assert "crn:v1:" in listed.output

        cleared = config("crn", "--clear")
        assert cleared.exit_code == 0
        assert CRN not in stored(config_file)

    def test_crn_needs_exactly_one_option(self):
        result = config("crn")

        assert result.exit_code == 1
        assert "Pass exactly one of --crn or --clear." in result.output

    def test_set_download_location(self, tmp_path, config_file):
        result = config("ddl", "--ddl", str(tmp_path))

        assert result.exit_code == 0
        assert f"New files will be downloaded to '{tmp_path}'." in result.output
        assert stored(config_file)[DOWNLOAD_LOCATION] == str(tmp_path)

    def test_download_location_must_exist(self, tmp_path, config_file):
        result = config("ddl", "--ddl", str(tmp_path / "missing"))

        assert result.exit_code == 1
        assert "is not an existing directory" in result.output
        assert not config_file.exists()

    def test_download_location_default_listed(self):
        result = config("ddl", "--list")

        assert result.exit_code == 0
        assert "Downloads" in result.output
