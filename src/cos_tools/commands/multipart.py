"""Multipart upload commands."""

import typer

from cos_tools import cli_params as p
from cos_tools.cli_runtime import run_command

from . import specs


def create_multipart_upload(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    cache_control: p.CacheControl = None,
    content_disposition: p.ContentDisposition = None,
    content_encoding: p.ContentEncoding = None,
    content_language: p.ContentLanguage = None,
    content_type: p.ContentType = None,
    metadata: p.Metadata = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Start a multipart upload and print its upload ID."""
    run_command(ctx, specs.CREATE_MULTIPART_UPLOAD)


def complete_multipart_upload(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    upload_id: p.UploadId = None,
    multipart_upload: p.MultipartUpload = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Assemble the uploaded parts into the final object."""
    run_command(ctx, specs.COMPLETE_MULTIPART_UPLOAD)


def abort_multipart_upload(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    upload_id: p.UploadId = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Abort a multipart upload and discard its parts."""
    run_command(ctx, specs.ABORT_MULTIPART_UPLOAD)


def list_multipart_uploads(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    delimiter: p.Delimiter = None,
    encoding_type: p.EncodingType = None,
    key_marker: p.KeyMarker = None,
    max_uploads: p.MaxUploads = None,
    prefix: p.Prefix = None,
    upload_id_marker: p.UploadIdMarker = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """List the multipart uploads in progress in a bucket."""
    run_command(ctx, specs.LIST_MULTIPART_UPLOADS)


def list_parts(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    upload_id: p.UploadId = None,
    max_parts: p.MaxParts = None,
    part_number_marker: p.PartNumberMarker = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """List the parts uploaded so far for a multipart upload."""
    run_command(ctx, specs.LIST_PARTS)


def upload_part(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    upload_id: p.UploadId = None,
    part_number: p.PartNumber = None,
    body: p.Body = None,
    content_length: p.ContentLength = None,
    content_md5: p.ContentMd5 = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Upload one part of a multipart upload."""
    run_command(ctx, specs.UPLOAD_PART)


def upload_part_copy(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    upload_id: p.UploadId = None,
    part_number: p.PartNumber = None,
    copy_source: p.CopySource = None,
    copy_source_if_match: p.CopySourceIfMatch = None,
    copy_source_if_modified_since: p.CopySourceIfModifiedSince = None,
    copy_source_if_none_match: p.CopySourceIfNoneMatch = None,
    copy_source_if_unmodified_since: p.CopySourceIfUnmodifiedSince = None,
    copy_source_range: p.CopySourceRange = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Upload one part of a multipart upload by copying from an existing object."""
    run_command(ctx, specs.UPLOAD_PART_COPY)


COMMANDS = {
    "create-multipart-upload": create_multipart_upload,
    "complete-multipart-upload": complete_multipart_upload,
    "abort-multipart-upload": abort_multipart_upload,
    "list-multipart-uploads": list_multipart_uploads,
    "list-parts": list_parts,
    "upload-part": upload_part,
    "upload-part-copy": upload_part_copy,
}
