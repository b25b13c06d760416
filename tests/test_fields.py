"""Tests for field tables and the field binder."""

from datetime import datetime, timezone

import pytest

from cos_tools.binding.fields import FieldTable, default_binder
from cos_tools.binding.shorthand import Record, Scalar
from cos_tools.core.exceptions import (
    BindingErrorKind,
    TypeCoercionError,
    UnknownFieldError,
)


@pytest.fixture
def binder():
    return default_binder()


class TestFieldTable:
    """Test field tables built from the service model."""

    def test_input_table_lists_members(self, binder):
        table = binder.input_table("DeleteObjects")

        assert "Bucket" in table
        assert "Delete" in table
        assert "bucket" not in table

    def test_tables_are_cached_per_shape(self, binder):
        assert binder.input_table("DeleteObjects") is binder.input_table("DeleteObjects")

    def test_unknown_field(self, binder):
        table = binder.input_table("DeleteObjects")

        with pytest.raises(UnknownFieldError) as exc_info:
            table.lookup("Bukket")

        assert exc_info.value.kind is BindingErrorKind.UNKNOWN_FIELD
        assert "has no field named 'Bukket'" in str(exc_info.value)

    def test_empty_table(self):
        table = FieldTable.from_shape(None)

        assert len(table) == 0
        assert list(table) == []


class TestBindField:
    """Test binding raw flag values onto requests."""

    def test_bind_string(self, binder):
        request = {}
        binder.bind_field(request, binder.input_table("DeleteBucket"), "Bucket", "b1")

        assert request == {"Bucket": "b1"}

    def test_bind_shorthand_structure(self, binder):
        request = {}
        binder.bind_field(
            request,
            binder.input_table("DeleteObjects"),
            "Delete",
            "Objects=[{Key=a},{Key=b}],Quiet=false",
        )

        assert request == {
            "Delete": {"Objects": [{"Key": "a"}, {"Key": "b"}], "Quiet": False}
        }

    def test_bind_json_structure(self, binder):
        request = {}
        binder.bind_field(
            request,
            binder.input_table("DeleteObjects"),
            "Delete",
            '{"Objects": [{"Key": "a"}], "Quiet": true}',
        )

        assert request == {"Delete": {"Objects": [{"Key": "a"}], "Quiet": True}}

    def test_nested_error_path(self, binder):
        with pytest.raises(UnknownFieldError) as exc_info:
            binder.bind_field(
                {},
                binder.input_table("DeleteObjects"),
                "Delete",
                "Objects=[{Key=a},{Kee=b}]",
            )

        assert exc_info.value.field == "Delete.Objects[1].Kee"

    def test_invalid_boolean_in_structure(self, binder):
        with pytest.raises(TypeCoercionError) as exc_info:
            binder.bind_field(
                {},
                binder.input_table("DeleteObjects"),
                "Delete",
                "Objects=[{Key=a}],Quiet=fale",
            )

        assert exc_info.value.field == "Delete.Quiet"

    def test_parts_keep_order_and_become_integers(self, binder):
        request = {}
        binder.bind_field(
            request,
            binder.input_table("CompleteMultipartUpload"),
            "MultipartUpload",
            "Parts=[{ETag=e2,PartNumber=2},{ETag=e1,PartNumber=1}]",
        )

        parts = request["MultipartUpload"]["Parts"]
        assert [part["PartNumber"] for part in parts] == [2, 1]
        assert [part["ETag"] for part in parts] == ["e2", "e1"]

    def test_integer_field(self, binder):
        request = {}
        binder.bind_field(request, binder.input_table("ListObjects"), "MaxKeys", "10")

        assert request["MaxKeys"] == 10

    def test_timestamp_field(self, binder):
        request = {}
        binder.bind_field(
            request,
            binder.input_table("HeadObject"),
            "IfModifiedSince",
            "2006-01-02T15:04:05Z",
        )

        assert request["IfModifiedSince"] == datetime(
            2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc
        )

    def test_closed_enum_is_strict(self, binder):
        with pytest.raises(TypeCoercionError, match="not one of"):
            binder.bind_field(
                {},
                binder.input_table("PutBucketVersioning"),
                "VersioningConfiguration",
                "Status=enabled",
            )

    def test_location_constraint_accepts_provider_values(self, binder):
        request = {}
        binder.bind_field(
            request,
            binder.input_table("CreateBucket"),
            "CreateBucketConfiguration",
            "LocationConstraint=us-south-smart",
        )

        assert request["CreateBucketConfiguration"] == {
            "LocationConstraint": "us-south-smart"
        }

    def test_map_field(self, binder):
        request = {}
        binder.bind_field(
            request, binder.input_table("PutObject"), "Metadata", "owner=me,team=data"
        )

        assert request["Metadata"] == {"owner": "me", "team": "data"}

    def test_blob_from_file(self, binder, sample_file):
        request = {}
        binder.bind_field(
            request, binder.input_table("PutObject"), "Body", f"file://{sample_file}"
        )

        assert request["Body"] == b"hello from cos-tools"

    def test_scalar_field_rejects_structure(self, binder):
        with pytest.raises(TypeCoercionError, match="expected a single string"):
            binder.convert(
                binder.input_table("DeleteBucket").lookup("Bucket").shape,
                Record({"a": Scalar("b")}),
                "Bucket",
            )

    def test_list_field_requires_list(self, binder):
        with pytest.raises(TypeCoercionError, match="expected a list"):
            binder.bind_field(
                {}, binder.input_table("DeleteObjects"), "Delete", "Objects=a"
            )
