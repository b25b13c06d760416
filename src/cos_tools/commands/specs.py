"""Field declarations of every storage command.

Each command names the SDK operation it runs and the request fields it
requires or accepts. Flags are the kebab-case form of the field name, so
``CORSConfiguration`` is given as ``--cors-configuration``.
"""

import re
from typing import Iterable

from cos_tools.binding.orchestrator import CommandSpec

_WORD_BREAK = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def flag_for(field_name: str) -> str:
    """Kebab-case flag name of a request field (``UploadId`` -> ``upload-id``)."""
    return _WORD_BREAK.sub("-", field_name).lower()


def command(
    name: str,
    operation: str,
    mandatory: Iterable[str] = (),
    optional: Iterable[str] = (),
) -> CommandSpec:
    return CommandSpec(
        name=name,
        operation=operation,
        mandatory={field: flag_for(field) for field in mandatory},
        optional={field: flag_for(field) for field in optional},
    )


OBJECT_HEADERS = (
    "CacheControl",
    "ContentDisposition",
    "ContentEncoding",
    "ContentLanguage",
    "ContentType",
    "Metadata",
)

# Buckets
LIST_BUCKETS = command("list-buckets", "ListBuckets")
CREATE_BUCKET = command(
    "create-bucket",
    "CreateBucket",
    ["Bucket"],
    ["ACL", "CreateBucketConfiguration"],
)
DELETE_BUCKET = command("delete-bucket", "DeleteBucket", ["Bucket"])
HEAD_BUCKET = command("head-bucket", "HeadBucket", ["Bucket"])
GET_BUCKET_LOCATION = command("get-bucket-location", "GetBucketLocation", ["Bucket"])
GET_BUCKET_CLASS = command("get-bucket-class", "GetBucketLocation", ["Bucket"])
GET_BUCKET_VERSIONING = command(
    "get-bucket-versioning", "GetBucketVersioning", ["Bucket"]
)
PUT_BUCKET_VERSIONING = command(
    "put-bucket-versioning",
    "PutBucketVersioning",
    ["Bucket", "VersioningConfiguration"],
)
GET_BUCKET_CORS = command("get-bucket-cors", "GetBucketCors", ["Bucket"])
PUT_BUCKET_CORS = command(
    "put-bucket-cors", "PutBucketCors", ["Bucket", "CORSConfiguration"]
)
DELETE_BUCKET_CORS = command("delete-bucket-cors", "DeleteBucketCors", ["Bucket"])
GET_BUCKET_ACL = command("get-bucket-acl", "GetBucketAcl", ["Bucket"])
PUT_BUCKET_ACL = command(
    "put-bucket-acl", "PutBucketAcl", ["Bucket"], ["ACL", "AccessControlPolicy"]
)

# Objects
PUT_OBJECT = command(
    "put-object",
    "PutObject",
    ["Bucket", "Key"],
    ["Body", *OBJECT_HEADERS, "Tagging"],
)
HEAD_OBJECT = command(
    "head-object",
    "HeadObject",
    ["Bucket", "Key"],
    [
        "IfMatch",
        "IfModifiedSince",
        "IfNoneMatch",
        "IfUnmodifiedSince",
        "Range",
        "PartNumber",
        "VersionId",
    ],
)
GET_OBJECT = command(
    "get-object",
    "GetObject",
    ["Bucket", "Key"],
    [
        "IfMatch",
        "IfModifiedSince",
        "IfNoneMatch",
        "IfUnmodifiedSince",
        "Range",
        "ResponseCacheControl",
        "ResponseContentDisposition",
        "ResponseContentEncoding",
        "ResponseContentLanguage",
        "ResponseContentType",
        "ResponseExpires",
    ],
)
DELETE_OBJECT = command("delete-object", "DeleteObject", ["Bucket", "Key"], ["VersionId"])
DELETE_OBJECTS = command("delete-objects", "DeleteObjects", ["Bucket", "Delete"])
COPY_OBJECT = command(
    "copy-object",
    "CopyObject",
    ["Bucket", "Key", "CopySource"],
    [
        "CacheControl",
        "ContentType",
        "CopySourceIfMatch",
        "CopySourceIfModifiedSince",
        "CopySourceIfNoneMatch",
        "CopySourceIfUnmodifiedSince",
        "Metadata",
        "MetadataDirective",
        "Tagging",
        "TaggingDirective",
    ],
)
LIST_OBJECTS = command(
    "list-objects",
    "ListObjects",
    ["Bucket"],
    ["Delimiter", "EncodingType", "Marker", "MaxKeys", "Prefix"],
)
LIST_OBJECT_VERSIONS = command(
    "list-object-versions",
    "ListObjectVersions",
    ["Bucket"],
    ["Delimiter", "KeyMarker", "MaxKeys", "Prefix", "VersionIdMarker"],
)
GET_OBJECT_ACL = command("get-object-acl", "GetObjectAcl", ["Bucket", "Key"], ["VersionId"])
GET_OBJECT_TAGGING = command(
    "get-object-tagging", "GetObjectTagging", ["Bucket", "Key"], ["VersionId"]
)
PUT_OBJECT_TAGGING = command(
    "put-object-tagging",
    "PutObjectTagging",
    ["Bucket", "Key", "Tagging"],
    ["VersionId"],
)
DELETE_OBJECT_TAGGING = command(
    "delete-object-tagging", "DeleteObjectTagging", ["Bucket", "Key"], ["VersionId"]
)

# Multipart uploads
CREATE_MULTIPART_UPLOAD = command(
    "create-multipart-upload",
    "CreateMultipartUpload",
    ["Bucket", "Key"],
    OBJECT_HEADERS,
)
COMPLETE_MULTIPART_UPLOAD = command(
    "complete-multipart-upload",
    "CompleteMultipartUpload",
    ["Bucket", "Key", "UploadId"],
    ["MultipartUpload"],
)
ABORT_MULTIPART_UPLOAD = command(
    "abort-multipart-upload", "AbortMultipartUpload", ["Bucket", "Key", "UploadId"]
)
LIST_MULTIPART_UPLOADS = command(
    "list-multipart-uploads",
    "ListMultipartUploads",
    ["Bucket"],
    ["Delimiter", "EncodingType", "KeyMarker", "MaxUploads", "Prefix", "UploadIdMarker"],
)
LIST_PARTS = command(
    "list-parts",
    "ListParts",
    ["Bucket", "Key", "UploadId"],
    ["MaxParts", "PartNumberMarker"],
)
UPLOAD_PART = command(
    "upload-part",
    "UploadPart",
    ["Bucket", "Key", "UploadId", "PartNumber"],
    ["Body", "ContentLength", "ContentMD5"],
)
UPLOAD_PART_COPY = command(
    "upload-part-copy",
    "UploadPartCopy",
    ["Bucket", "Key", "UploadId", "PartNumber", "CopySource"],
    [
        "CopySourceIfMatch",
        "CopySourceIfModifiedSince",
        "CopySourceIfNoneMatch",
        "CopySourceIfUnmodifiedSince",
        "CopySourceRange",
    ],
)

ALL_COMMANDS = {
    spec.name: spec
    for spec in (
        LIST_BUCKETS,
        CREATE_BUCKET,
        DELETE_BUCKET,
        HEAD_BUCKET,
        GET_BUCKET_LOCATION,
        GET_BUCKET_CLASS,
        GET_BUCKET_VERSIONING,
        PUT_BUCKET_VERSIONING,
        GET_BUCKET_CORS,
        PUT_BUCKET_CORS,
        DELETE_BUCKET_CORS,
        GET_BUCKET_ACL,
        PUT_BUCKET_ACL,
        PUT_OBJECT,
        HEAD_OBJECT,
        GET_OBJECT,
        DELETE_OBJECT,
        DELETE_OBJECTS,
        COPY_OBJECT,
        LIST_OBJECTS,
        LIST_OBJECT_VERSIONS,
        GET_OBJECT_ACL,
        GET_OBJECT_TAGGING,
        PUT_OBJECT_TAGGING,
        DELETE_OBJECT_TAGGING,
        CREATE_MULTIPART_UPLOAD,
        COMPLETE_MULTIPART_UPLOAD,
        ABORT_MULTIPART_UPLOAD,
        LIST_MULTIPART_UPLOADS,
        LIST_PARTS,
        UPLOAD_PART,
        UPLOAD_PART_COPY,
    )
}
