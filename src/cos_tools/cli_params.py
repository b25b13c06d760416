"""Shared CLI parameter definitions.

Every storage command takes its request fields as text options named after
the field in kebab-case (``--upload-id``, ``--cors-configuration``). The
option values are passed on unconverted; type conversion and mandatory-field
checks happen when the request is bound, so that a missing or malformed
value is reported the same way for every command.

Usage:
    Use the aliases directly as parameter annotations:

    def delete_bucket(
        ctx: typer.Context,
        bucket: Bucket = None,
        region: Region = None,
    ) -> None:
        ...

Parameter Categories:
    - Global parameters: region, endpoint and output selection
    - Bucket and object identification
    - Structured parameters: accept shorthand, JSON or file:// references
    - Conditional, listing and multipart parameters
"""

from typing import Annotated, Optional

import typer
from typer.models import OptionInfo

STRUCTURED_HELP = "Shorthand (Key=Value,List=[...]), JSON, or file://<path>"


def _text(flag: str, help_text: str) -> OptionInfo:
    return typer.Option(flag, help=help_text, show_default=False)


def _structured(flag: str, what: str) -> OptionInfo:
    return typer.Option(flag, help=f"{what}. {STRUCTURED_HELP}", show_default=False)


# Global parameters
Region = Annotated[
    Optional[str],
    _text("--region", "Region of the bucket; defaults to the configured region"),
]
EndpointUrl = Annotated[
    Optional[str],
    _text("--endpoint-url", "Custom service endpoint URL"),
]
Output = Annotated[
    Optional[str],
    _text("--output", "Output format: text or json"),
]
JsonOutput = Annotated[
    bool,
    typer.Option("--json", help="Alias for --output json"),
]

# Identification
Bucket = Annotated[Optional[str], _text("--bucket", "Bucket name")]
Key = Annotated[Optional[str], _text("--key", "Object key")]
VersionId = Annotated[Optional[str], _text("--version-id", "Object version ID")]
UploadId = Annotated[Optional[str], _text("--upload-id", "Multipart upload ID")]
PartNumber = Annotated[Optional[str], _text("--part-number", "Part number (1-10000)")]
CopySource = Annotated[
    Optional[str],
    _text("--copy-source", "Source object as <bucket>/<key>"),
]

# Structured
CreateBucketConfiguration = Annotated[
    Optional[str],
    _structured("--create-bucket-configuration", "Bucket configuration"),
]
VersioningConfiguration = Annotated[
    Optional[str],
    _structured("--versioning-configuration", "Versioning state, e.g. Status=Enabled"),
]
CorsConfiguration = Annotated[
    Optional[str],
    _structured("--cors-configuration", "CORS rules"),
]
AccessControlPolicy = Annotated[
    Optional[str],
    _structured("--access-control-policy", "Access control policy"),
]
Delete = Annotated[
    Optional[str],
    _structured("--delete", "Objects to delete, e.g. Objects=[{Key=a},{Key=b}],Quiet=true"),
]
MultipartUpload = Annotated[
    Optional[str],
    _structured("--multipart-upload", "Parts, e.g. Parts=[{ETag=...,PartNumber=1}]"),
]
Metadata = Annotated[
    Optional[str],
    _structured("--metadata", "User metadata as key=value pairs"),
]

# Object headers
Acl = Annotated[Optional[str], _text("--acl", "Canned ACL, e.g. private")]
Body = Annotated[
    Optional[str],
    _text("--body", "Object content, or file://<path> to upload a file"),
]
CacheControl = Annotated[Optional[str], _text("--cache-control", "Cache-Control header")]
ContentDisposition = Annotated[
    Optional[str],
    _text("--content-disposition", "Content-Disposition header"),
]
ContentEncoding = Annotated[
    Optional[str],
    _text("--content-encoding", "Content-Encoding header"),
]
ContentLanguage = Annotated[
    Optional[str],
    _text("--content-language", "Content-Language header"),
]
ContentType = Annotated[Optional[str], _text("--content-type", "Content-Type header")]
ContentLength = Annotated[
    Optional[str],
    _text("--content-length", "Size of the body in bytes"),
]
ContentMd5 = Annotated[
    Optional[str],
    _text("--content-md5", "Base64 encoded MD5 digest of the body"),
]
Tagging = Annotated[
    Optional[str], _structured("--tagging", "Tag set, e.g. TagSet=[{Key=k,Value=v}]")
]
TaggingHeader = Annotated[
    Optional[str], _text("--tagging", "URL-encoded tags for the new object, e.g. k1=v1&k2=v2")
]
MetadataDirective = Annotated[
    Optional[str],
    _text("--metadata-directive", "COPY or REPLACE"),
]
TaggingDirective = Annotated[
    Optional[str],
    _text("--tagging-directive", "COPY or REPLACE"),
]

# Conditions
IfMatch = Annotated[Optional[str], _text("--if-match", "Only if the ETag matches")]
IfNoneMatch = Annotated[
    Optional[str],
    _text("--if-none-match", "Only if the ETag does not match"),
]
IfModifiedSince = Annotated[
    Optional[str],
    _text("--if-modified-since", "Only if modified since (RFC3339, date or epoch)"),
]
IfUnmodifiedSince = Annotated[
    Optional[str],
    _text("--if-unmodified-since", "Only if not modified since (RFC3339, date or epoch)"),
]
Range = Annotated[Optional[str], _text("--range", "Byte range, e.g. bytes=0-9")]
CopySourceIfMatch = Annotated[
    Optional[str],
    _text("--copy-source-if-match", "Copy only if the source ETag matches"),
]
CopySourceIfNoneMatch = Annotated[
    Optional[str],
    _text("--copy-source-if-none-match", "Copy only if the source ETag does not match"),
]
CopySourceIfModifiedSince = Annotated[
    Optional[str],
    _text("--copy-source-if-modified-since", "Copy only if the source was modified since"),
]
CopySourceIfUnmodifiedSince = Annotated[
    Optional[str],
    _text(
        "--copy-source-if-unmodified-since",
        "Copy only if the source was not modified since",
    ),
]
CopySourceRange = Annotated[
    Optional[str],
    _text("--copy-source-range", "Source byte range to copy, e.g. bytes=0-5242879"),
]

# Response header overrides
ResponseCacheControl = Annotated[
    Optional[str],
    _text("--response-cache-control", "Cache-Control header of the response"),
]
ResponseContentDisposition = Annotated[
    Optional[str],
    _text("--response-content-disposition", "Content-Disposition header of the response"),
]
ResponseContentEncoding = Annotated[
    Optional[str],
    _text("--response-content-encoding", "Content-Encoding header of the response"),
]
ResponseContentLanguage = Annotated[
    Optional[str],
    _text("--response-content-language", "Content-Language header of the response"),
]
ResponseContentType = Annotated[
    Optional[str],
    _text("--response-content-type", "Content-Type header of the response"),
]
ResponseExpires = Annotated[
    Optional[str],
    _text("--response-expires", "Expires header of the response (RFC3339, date or epoch)"),
]

# Downloads
OutFile = Annotated[
    Optional[str],
    typer.Argument(
        help="File to write the object to; defaults to the key under the download location",
        show_default=False,
    ),
]
Force = Annotated[
    bool, typer.Option("--force", help="Overwrite the destination file if it exists")
]

# Listing
Delimiter = Annotated[Optional[str], _text("--delimiter", "Character used to group keys")]
EncodingType = Annotated[Optional[str], _text("--encoding-type", "Key encoding, e.g. url")]
Marker = Annotated[Optional[str], _text("--marker", "Key to start listing after")]
MaxKeys = Annotated[Optional[str], _text("--max-keys", "Maximum number of keys returned")]
Prefix = Annotated[Optional[str], _text("--prefix", "Only keys beginning with this prefix")]
KeyMarker = Annotated[Optional[str], _text("--key-marker", "Key to start listing after")]
VersionIdMarker = Annotated[
    Optional[str],
    _text("--version-id-marker", "Version to start listing after"),
]
UploadIdMarker = Annotated[
    Optional[str],
    _text("--upload-id-marker", "Upload to start listing after"),
]
MaxUploads = Annotated[
    Optional[str],
    _text("--max-uploads", "Maximum number of uploads returned"),
]
MaxParts = Annotated[Optional[str], _text("--max-parts", "Maximum number of parts returned")]
PartNumberMarker = Annotated[
    Optional[str],
    _text("--part-number-marker", "Part number to start listing after"),
]
