"""Tests for request binding and region resolution."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from cos_tools.binding.orchestrator import (
    CommandSpec,
    InvocationContext,
    bind_request,
    validate_inputs_and_resolve_region,
)
from cos_tools.binding.region import resolve_region
from cos_tools.commands.specs import (
    ALL_COMMANDS,
    COMPLETE_MULTIPART_UPLOAD,
    DELETE_OBJECTS,
    LIST_OBJECTS,
    flag_for,
)
from cos_tools.core.exceptions import (
    BindingErrorKind,
    MissingMandatoryFieldError,
    RegionUnresolvedError,
    TypeCoercionError,
)
from cos_tools.core.plugin_config import DEFAULT_REGION, PluginConfig


def make_config(**values):
    config = MagicMock()
    config.get_string.side_effect = lambda key, default=None: values.get(key, default)
    return config


class TestCommandSpec:
    """Test command field declarations."""

    def test_flags_are_kebab_case(self):
        assert flag_for("UploadId") == "upload-id"
        assert flag_for("CORSConfiguration") == "cors-configuration"
        assert flag_for("ContentMD5") == "content-md5"
        assert flag_for("ACL") == "acl"
        assert flag_for("CopySourceIfMatch") == "copy-source-if-match"

    def test_overlapping_fields_rejected(self):
        with pytest.raises(PydanticValidationError, match="both mandatory and optional"):
            CommandSpec(
                name="x",
                operation="DeleteBucket",
                mandatory={"Bucket": "bucket"},
                optional={"Bucket": "bucket2"},
            )

    def test_duplicate_flags_rejected(self):
        with pytest.raises(PydanticValidationError, match="more than once"):
            CommandSpec(
                name="x",
                operation="HeadObject",
                mandatory={"Bucket": "bucket"},
                optional={"Key": "bucket"},
            )

    @pytest.mark.parametrize("name", sorted(ALL_COMMANDS))
    def test_declared_fields_exist_in_the_service_model(self, name):
        from cos_tools.binding.fields import default_binder

        spec = ALL_COMMANDS[name]
        table = default_binder().input_table(spec.operation)

        for field_name in list(spec.mandatory) + list(spec.optional):
            assert field_name in table, f"{name}: {field_name}"


class TestBindRequest:
    """Test population of requests from invocation flags."""

    def test_sunny_delete(self):
        invocation = InvocationContext.from_flags(
            {"bucket": "b1", "delete": "Objects=[{Key=a},{Key=b}],Quiet=false"}
        )

        request = bind_request(DELETE_OBJECTS, invocation)

        assert request == {
            "Bucket": "b1",
            "Delete": {"Objects": [{"Key": "a"}, {"Key": "b"}], "Quiet": False},
        }

    def test_first_missing_mandatory_field_is_reported(self):
        invocation = InvocationContext.from_flags({})

        with pytest.raises(MissingMandatoryFieldError) as exc_info:
            bind_request(DELETE_OBJECTS, invocation)

        assert exc_info.value.field == "Bucket"
        assert exc_info.value.kind is BindingErrorKind.MISSING_MANDATORY_FIELD
        assert "--bucket" in str(exc_info.value)

    def test_missing_second_mandatory_field(self):
        invocation = InvocationContext.from_flags({"bucket": "b1"})

        with pytest.raises(MissingMandatoryFieldError) as exc_info:
            bind_request(DELETE_OBJECTS, invocation)

        assert exc_info.value.field == "Delete"

    def test_unset_optional_fields_stay_absent(self):
        invocation = InvocationContext(
            values={"bucket": "b1", "prefix": None, "max-keys": None},
            explicit=frozenset({"bucket"}),
        )

        assert bind_request(LIST_OBJECTS, invocation) == {"Bucket": "b1"}

    def test_explicit_optional_fields_are_bound(self):
        invocation = InvocationContext.from_flags(
            {"bucket": "b1", "prefix": "logs/", "max-keys": "5"}
        )

        request = bind_request(LIST_OBJECTS, invocation)

        assert request == {"Bucket": "b1", "Prefix": "logs/", "MaxKeys": 5}

    def test_multipart_parts(self):
        invocation = InvocationContext.from_flags(
            {
                "bucket": "b1",
                "key": "k",
                "upload-id": "u1",
                "multipart-upload": "Parts=[{ETag=e1,PartNumber=1},{ETag=e2,PartNumber=2}]",
            }
        )

        request = bind_request(COMPLETE_MULTIPART_UPLOAD, invocation)

        assert request["MultipartUpload"]["Parts"] == [
            {"ETag": "e1", "PartNumber": 1},
            {"ETag": "e2", "PartNumber": 2},
        ]

    def test_binding_is_repeatable(self):
        invocation = InvocationContext.from_flags(
            {"bucket": "b1", "delete": "Objects=[{Key=a}]"}
        )

        assert bind_request(DELETE_OBJECTS, invocation) == bind_request(
            DELETE_OBJECTS, invocation
        )

    def test_invalid_boolean_aborts_binding(self):
        invocation = InvocationContext.from_flags(
            {"bucket": "b1", "delete": "Objects=[{Key=a}],Quiet=fale"}
        )

        with pytest.raises(TypeCoercionError) as exc_info:
            bind_request(DELETE_OBJECTS, invocation)

        assert exc_info.value.field == "Delete.Quiet"


class TestResolveRegion:
    """Test region precedence."""

    def test_flag_wins(self):
        assert resolve_region("eu-de", make_config(**{DEFAULT_REGION: "us-south"})) == "eu-de"

    def test_blank_flag_falls_back_to_config(self):
        config = make_config(**{DEFAULT_REGION: "us-south"})

        assert resolve_region("  ", config) == "us-south"

    def test_no_region(self):
        with pytest.raises(RegionUnresolvedError) as exc_info:
            resolve_region(None, make_config())

        assert exc_info.value.kind is BindingErrorKind.REGION_REQUIRED

    def test_environment_overrides_file(self, write_config, monkeypatch):
        from cos_tools.core import settings

        write_config({DEFAULT_REGION: "us-south"})
        monkeypatch.setattr(settings, "default_region", "jp-tok")

        assert resolve_region(None, PluginConfig.from_settings()) == "jp-tok"
        assert resolve_region("eu-gb", PluginConfig.from_settings()) == "eu-gb"


class TestValidateInputsAndResolveRegion:
    """Test the combined binding entry point."""

    def test_returns_request_and_region(self):
        invocation = InvocationContext.from_flags(
            {"bucket": "b1", "delete": "Objects=[{Key=a}]", "region": "eu-de"}
        )

        bound = validate_inputs_and_resolve_region(DELETE_OBJECTS, invocation, make_config())

        assert bound.region == "eu-de"
        assert bound.request["Bucket"] == "b1"

    def test_binding_errors_come_before_region_errors(self):
        invocation = InvocationContext.from_flags({"bucket": "b1"})

        with pytest.raises(MissingMandatoryFieldError):
            validate_inputs_and_resolve_region(DELETE_OBJECTS, invocation, make_config())
