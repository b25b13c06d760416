"""Bucket commands."""

import typer

from cos_tools import cli_params as p
from cos_tools.cli_runtime import run_command

from . import specs


def list_buckets(
    ctx: typer.Context,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """List all the buckets in your account."""
    run_command(ctx, specs.LIST_BUCKETS)


def create_bucket(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    acl: p.Acl = None,
    create_bucket_configuration: p.CreateBucketConfiguration = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Create a new bucket."""
    run_command(ctx, specs.CREATE_BUCKET)


def delete_bucket(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Delete an existing, empty bucket."""
    run_command(ctx, specs.DELETE_BUCKET)


def head_bucket(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Check that a bucket exists and is accessible."""
    run_command(ctx, specs.HEAD_BUCKET)


def get_bucket_location(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the region and storage class of a bucket."""
    run_command(ctx, specs.GET_BUCKET_LOCATION)


def get_bucket_class(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the storage class of a bucket."""
    run_command(ctx, specs.GET_BUCKET_CLASS)


def get_bucket_versioning(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the versioning state of a bucket."""
    run_command(ctx, specs.GET_BUCKET_VERSIONING)


def put_bucket_versioning(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    versioning_configuration: p.VersioningConfiguration = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Set the versioning state of a bucket."""
    run_command(ctx, specs.PUT_BUCKET_VERSIONING)


def get_bucket_cors(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the CORS configuration of a bucket."""
    run_command(ctx, specs.GET_BUCKET_CORS)


def put_bucket_cors(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    cors_configuration: p.CorsConfiguration = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Set the CORS configuration of a bucket."""
    run_command(ctx, specs.PUT_BUCKET_CORS)


def delete_bucket_cors(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Remove the CORS configuration of a bucket."""
    run_command(ctx, specs.DELETE_BUCKET_CORS)


def get_bucket_acl(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Show the access control list of a bucket."""
    run_command(ctx, specs.GET_BUCKET_ACL)


def put_bucket_acl(
    ctx: typer.Context,
    bucket: p.Bucket = None,
    acl: p.Acl = None,
    access_control_policy: p.AccessControlPolicy = None,
    region: p.Region = None,
    endpoint_url: p.EndpointUrl = None,
    output: p.Output = None,
    json_output: p.JsonOutput = False,
) -> None:
    """Set the access control list of a bucket."""
    run_command(ctx, specs.PUT_BUCKET_ACL)


COMMANDS = {
    "list-buckets": list_buckets,
    "create-bucket": create_bucket,
    "delete-bucket": delete_bucket,
    "head-bucket": head_bucket,
    "get-bucket-location": get_bucket_location,
    "get-bucket-class": get_bucket_class,
    "get-bucket-versioning": get_bucket_versioning,
    "put-bucket-versioning": put_bucket_versioning,
    "get-bucket-cors": get_bucket_cors,
    "put-bucket-cors": put_bucket_cors,
    "delete-bucket-cors": delete_bucket_cors,
    "get-bucket-acl": get_bucket_acl,
    "put-bucket-acl": put_bucket_acl,
}
