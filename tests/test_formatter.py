"""Tests for text and JSON rendering."""

import io
import json
from datetime import datetime, timezone

import pytest

from cos_tools.binding.fields import default_binder
from cos_tools.core.exceptions import ValidationError
from cos_tools.objectstorage.operations import OperationResult
from cos_tools.render.formatter import (
    JsonRenderer,
    TextRenderer,
    get_renderer,
    humanize,
    to_canonical,
)

CREATED = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


def result(command, operation, response, request=None, region="us-south"):
    return OperationResult(
        command=command,
        operation=operation,
        request=request or {},
        response=response,
        region=region,
    )


class TestHumanize:
    """Test display labels."""

    @pytest.mark.parametrize(
        "name,label",
        [
            ("LastModified", "Last Modified"),
            ("CORSRules", "CORS Rules"),
            ("ETag", "ETag"),
            ("ID", "ID"),
            ("ContentMD5", "Content MD5"),
            ("Key", "Key"),
        ],
    )
    def test_labels(self, name, label):
        assert humanize(name) == label


class TestTextRenderer:
    """Test text output."""

    def test_list_buckets(self):
        output = TextRenderer().render(
            result(
                "list-buckets",
                "ListBuckets",
                {
                    "Buckets": [{"Name": "alpha", "CreationDate": CREATED}],
                    "Owner": {"DisplayName": "me", "ID": "abc"},
                    "ResponseMetadata": {"HTTPStatusCode": 200},
                },
            )
        )

        lines = output.splitlines()
        assert lines[0] == "OK"
        assert "Buckets 1:" in lines
        assert "  Name: alpha" in lines
        assert "  Creation Date: Jan 02, 2006 at 15:04:05" in lines
        assert "Owner:" in lines
        assert "  Display Name: me" in lines
        assert "HTTPStatusCode" not in output

    def test_empty_collection_message(self):
        output = TextRenderer().render(
            result("list-buckets", "ListBuckets", {"Buckets": []})
        )

        assert output.splitlines() == ["OK", "No buckets found in your account."]

    def test_empty_versioning_response(self):
        output = TextRenderer().render(
            result(
                "get-bucket-versioning",
                "GetBucketVersioning",
                {"ResponseMetadata": {}},
                request={"Bucket": "b1"},
            )
        )

        assert "versioning has never been configured for this bucket" in output

    def test_success_message_without_fields(self):
        output = TextRenderer().render(
            result("delete-bucket", "DeleteBucket", {}, request={"Bucket": "b1"})
        )

        lines = output.splitlines()
        assert lines[0] == "OK"
        assert lines[1].startswith("Successfully deleted bucket 'b1'.")
        assert len(lines) == 2

    def test_sizes_timestamps_and_maps(self):
        output = TextRenderer().render(
            result(
                "head-object",
                "HeadObject",
                {
                    "ContentLength": 1536,
                    "LastModified": CREATED,
                    "ETag": '"abc"',
                    "Metadata": {"owner": "me"},
                },
                request={"Bucket": "b1", "Key": "k1"},
            )
        )

        lines = output.splitlines()
        assert lines[1] == "Object 'k1' found in bucket 'b1'."
        assert "Content Length: 1.50 KiB" in lines
        assert "Last Modified: Jan 02, 2006 at 15:04:05" in lines
        assert 'ETag: "abc"' in lines
        assert "Metadata:" in lines
        assert "  owner: me" in lines

    def test_numbered_blocks_keep_order(self):
        output = TextRenderer().render(
            result(
                "delete-objects",
                "DeleteObjects",
                {"Deleted": [{"Key": "a"}, {"Key": "b"}]},
            )
        )

        assert output.splitlines()[1:] == [
            "Deleted 1:",
            "  Key: a",
            "Deleted 2:",
            "  Key: b",
        ]

    def test_bucket_location(self):
        output = TextRenderer().render(
            result(
                "get-bucket-location",
                "GetBucketLocation",
                {"LocationConstraint": "us-south-smart"},
                request={"Bucket": "b1"},
            )
        )

        assert output.splitlines() == [
            "OK",
            "Details about bucket 'b1':",
            "Region: us-south",
            "Class: Smart",
        ]

    def test_bucket_class_without_constraint(self):
        output = TextRenderer().render(
            result(
                "get-bucket-class",
                "GetBucketLocation",
                {"LocationConstraint": None},
                request={"Bucket": "b1"},
            )
        )

        assert output.splitlines() == ["OK", "Details about bucket 'b1':", "Class: Standard"]


class TestJsonRenderer:
    """Test JSON output."""

    def test_round_trip(self):
        output = JsonRenderer().render(
            result(
                "list-buckets",
                "ListBuckets",
                {
                    "Buckets": [{"Name": "alpha", "CreationDate": CREATED}],
                    "Owner": {"DisplayName": "mé", "ID": "abc"},
                    "ResponseMetadata": {"HTTPStatusCode": 200},
                },
            )
        )

        assert json.loads(output) == {
            "Buckets": [{"Name": "alpha", "CreationDate": "2006-01-02T15:04:05+00:00"}],
            "Owner": {"DisplayName": "mé", "ID": "abc"},
        }
        assert "mé" in output

    def test_operation_without_output(self):
        output = JsonRenderer().render(result("delete-bucket", "DeleteBucket", {}))

        assert json.loads(output) == {}


class TestToCanonical:
    """Test canonical conversion."""

    def test_streaming_body_is_skipped(self):
        shape = default_binder().output_shape("GetObject")

        value = to_canonical(shape, {"Body": io.BytesIO(b"x"), "ContentLength": 1})

        assert value == {"ContentLength": 1}

    def test_bytes_are_base64(self):
        assert to_canonical(None, b"ab") == "YWI="


class TestGetRenderer:
    """Test renderer selection."""

    def test_defaults_to_text(self):
        assert isinstance(get_renderer(), TextRenderer)

    @pytest.mark.parametrize("output,json_flag", [("json", False), ("JSON", False), (None, True)])
    def test_json(self, output, json_flag):
        assert isinstance(get_renderer(output, json_flag), JsonRenderer)

    def test_unknown_format(self):
        with pytest.raises(ValidationError, match="Invalid output format"):
            get_renderer("yaml")

    def test_conflicting_flags(self):
        with pytest.raises(ValidationError, match="--json"):
            get_renderer("text", True)
