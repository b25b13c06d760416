"""Object commands."""

import typer

from cos_tools import cli_params as p
from cos_tools.cli_runtime import run_command, run_download

from . import specs


def put_object(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    body: p.Body = None,
    cache_control: p.CacheControl = None,
    content_disposition: p.ContentDisposition = None,
    content_encoding: p.ContentEncoding = None,
    content_language: p.ContentLanguage = None,
    content_type: p.ContentType = None,
    metadata: p.Metadata = None,
    tagging: p.TaggingHeader = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Upload an object in a single request."""
    run_command(ctx, specs.PUT_OBJECT)


def head_object(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    if_match: p.IfMatch = None,
    if_modified_since: p.IfModifiedSince = None,
    if_none_match: p.IfNoneMatch = None,
    if_unmodified_since: p.IfUnmodifiedSince = None,
    range_: p.Range = None,
    part_number: p.PartNumber = None,
    version_id: p.VersionId = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the metadata of an object."""
    run_command(ctx, specs.HEAD_OBJECT)


def get_object(
    ctx: typer.Context,
    outfile: p.OutFile = None,
    bucket: p.Bucket = None,
    key: p.Key = None,
    if_match: p.IfMatch = None,
    if_modified_since: p.IfModifiedSince = None,
    if_none_match: p.IfNoneMatch = None,
    if_unmodified_since: p.IfUnmodifiedSince = None,
    range_: p.Range = None,
    response_cache_control: p.ResponseCacheControl = None,
    response_content_disposition: p.ResponseContentDisposition = None,
    response_content_encoding: p.ResponseContentEncoding = None,
    response_content_language: p.ResponseContentLanguage = None,
    response_content_type: p.ResponseContentType = None,
    response_expires: p.ResponseExpires = None,
    force: p.Force = False,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Download an object to OUTFILE, or under the default download location."""
    run_download(ctx, specs.GET_OBJECT, outfile, force)


def delete_object(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    version_id: p.VersionId = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Delete an object."""
    run_command(ctx, specs.DELETE_OBJECT)


def delete_objects(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    delete: p.Delete = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Delete several objects in one request."""
    run_command(ctx, specs.DELETE_OBJECTS)


def copy_object(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    copy_source: p.CopySource = None,
    cache_control: p.CacheControl = None,
    content_type: p.ContentType = None,
    copy_source_if_match: p.CopySourceIfMatch = None,
    copy_source_if_modified_since: p.CopySourceIfModifiedSince = None,
    copy_source_if_none_match: p.CopySourceIfNoneMatch = None,
    copy_source_if_unmodified_since: p.CopySourceIfUnmodifiedSince = None,
    metadata: p.Metadata = None,
    metadata_directive: p.MetadataDirective = None,
    tagging: p.TaggingHeader = None,
    tagging_directive: p.TaggingDirective = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Copy an object, within a bucket or between buckets."""
    run_command(ctx, specs.COPY_OBJECT)


def list_objects(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    delimiter: p.Delimiter = None,
    encoding_type: p.EncodingType = None,
    marker: p.Marker = None,
    max_keys: p.MaxKeys = None,
    prefix: p.Prefix = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """List the objects in a bucket."""
    run_command(ctx, specs.LIST_OBJECTS)


def list_object_versions(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    delimiter: p.Delimiter = None,
    key_marker: p.KeyMarker = None,
    max_keys: p.MaxKeys = None,
    prefix: p.Prefix = None,
    version_id_marker: p.VersionIdMarker = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """List the object versions in a bucket."""
    run_command(ctx, specs.LIST_OBJECT_VERSIONS)


def get_object_acl(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    version_id: p.VersionId = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the access control list of an object."""
    run_command(ctx, specs.GET_OBJECT_ACL)


def get_object_tagging(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    version_id: p.VersionId = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the tags of an object."""
    run_command(ctx, specs.GET_OBJECT_TAGGING)


def put_object_tagging(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    tagging: p.Tagging = None,
    version_id: p.VersionId = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Replace the tags of an object."""
    run_command(ctx, specs.PUT_OBJECT_TAGGING)


def delete_object_tagging(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    key: p.Key = None,
    version_id: p.VersionId = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Remove all tags of an object."""
    run_command(ctx, specs.DELETE_OBJECT_TAGGING)


COMMANDS = {
    "put-object": put_object,
    "head-object": head_object,
    "get-object": get_object,
    "delete-object": delete_object,
    "delete-objects": delete_objects,
    "copy-object": copy_object,
    "list-objects": list_objects,
    "list-object-versions": list_object_versions,
    "get-object-acl": get_object_acl,
    "get-object-tagging": get_object_tagging,
    "put-object-tagging": put_object_tagging,
    "delete-object-tagging": delete_object_tagging,
}
