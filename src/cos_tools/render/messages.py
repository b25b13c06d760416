"""User-facing messages."""

from typing import Any, Mapping, Optional

# Confirmation lines printed after "OK", keyed by command name. Placeholders
# are filled from the request fields and the resolved region.
SUCCESS_MESSAGES = {
    "create-bucket": "Successfully created bucket '{Bucket}' in region '{region}'.",
    "delete-bucket": "Successfully deleted bucket '{Bucket}'. The bucket '{Bucket}' "
    "will be available for reuse after 15 minutes.",
    "head-bucket": "Bucket '{Bucket}' found in region '{region}'.",
    "put-bucket-versioning": "Successfully set versioning configuration on bucket: {Bucket}",
    "put-bucket-cors": "Successfully set CORS configuration on bucket: {Bucket}",
    "delete-bucket-cors": "Successfully deleted CORS configuration on bucket: {Bucket}",
    "put-bucket-acl": "Successfully set ACL on bucket: {Bucket}",
    "put-object": "Successfully uploaded object '{Key}' to bucket '{Bucket}'.",
    "get-object": "Successfully downloaded '{Key}' from bucket '{Bucket}'.",
    "head-object": "Object '{Key}' found in bucket '{Bucket}'.",
    "delete-object": "Delete '{Key}' from bucket '{Bucket}' ran successfully.",
    "copy-object": "Successfully copied '{CopySource}' to bucket '{Bucket}' as '{Key}'.",
    "put-object-tagging": "Successfully set tags on object '{Key}' in bucket '{Bucket}'.",
    "delete-object-tagging": "Successfully deleted tags of object '{Key}' "
    "in bucket '{Bucket}'.",
    "create-multipart-upload": "Details about your multipart upload instance:",
    "complete-multipart-upload": "Successfully uploaded '{Key}' to bucket '{Bucket}'.",
    "abort-multipart-upload": "Successfully aborted a multipart upload instance with "
    "key '{Key}' and bucket '{Bucket}'.",
    "upload-part": "Successfully uploaded part {PartNumber} of object '{Key}'.",
    "upload-part-copy": "Uploaded part copy '{PartNumber}' of object '{Key}'.",
}

# Shown when a response carries no populated field at all.
EMPTY_RESULT_MESSAGES = {
    "get-bucket-versioning": "(empty response from server; versioning has never "
    "been configured for this bucket)",
    "get-bucket-cors": "No CORS configuration has been set on bucket '{Bucket}'.",
}

DEFAULT_EMPTY_RESULT = "(empty response from server)"

# Collections whose absence deserves an explicit note, keyed by command name.
EMPTY_COLLECTION_MESSAGES = {
    "list-buckets": ("Buckets", "No buckets found in your account."),
    "list-objects": ("Contents", "No objects found in bucket '{Bucket}'."),
    "list-object-versions": ("Versions", "No object versions found in bucket '{Bucket}'."),
    "list-multipart-uploads": (
        "Uploads",
        "No multipart uploads found in bucket '{Bucket}'.",
    ),
    "list-parts": ("Parts", "No parts found for upload '{UploadId}'."),
    "get-object-tagging": ("TagSet", "No tags returned"),
    "get-bucket-cors": ("CORSRules", "No CORS rules found on bucket '{Bucket}'."),
}

# Friendly explanations of common service error codes.
ERROR_MESSAGES = {
    "InvalidBucketName": "The specified bucket name is invalid. Bucket names must "
    "start and end in alphanumeric characters (from 3 to 63) and are limited to "
    "lowercase, numbers, non-consecutive dots, and hyphens.",
    "BucketAlreadyExists": "The requested bucket name is not available. The bucket "
    "namespace is shared by all users of the system. Select a different name and "
    "try again.",
    "AccessDenied": "Access to the requested resource was denied. Check your "
    "credentials and permissions.",
    "BucketAlreadyOwnedByYou": "A bucket with the specified name already exists in "
    "your account. Create a bucket with a new name.",
    "NoSuchBucket": "The specified bucket was not found in your account. This may "
    "be because you provided the wrong region. Provide the bucket's correct region "
    "and try again.",
    "BucketNotEmpty": "The specified bucket is not empty. Delete all the files in "
    "the bucket, then try again.",
    "EntityTooSmall": "Your proposed upload is smaller than the minimum allowed "
    "size. File parts must be greater than 5 MB in size, except for the last part.",
    "NoSuchKey": "The specified object was not found in the bucket. Ensure that "
    "you have set the correct region with the region flag.",
    "NoSuchUpload": "The specified multipart upload does not exist. The upload ID "
    "may be invalid, or the upload may have been aborted or completed.",
}

MISSING_CREDENTIALS_MESSAGE = (
    "Unable to locate credentials. Store HMAC keys with 'cos-tools config hmac' "
    "or configure the AWS credential chain."
)


class _Placeholders(dict):
    def __missing__(self, key: str) -> str:
        return ""


def fill(template: str, request: Mapping[str, Any], region: str = "") -> str:
    """Fill a message template from request fields."""
    values = _Placeholders({k: v for k, v in request.items() if isinstance(v, (str, int))})
    values["region"] = region
    return template.format_map(values)


def success_message(command: str, request: Mapping[str, Any], region: str) -> Optional[str]:
    template = SUCCESS_MESSAGES.get(command)
    return fill(template, request, region) if template else None


def empty_result_message(command: str, request: Mapping[str, Any]) -> str:
    return fill(EMPTY_RESULT_MESSAGES.get(command, DEFAULT_EMPTY_RESULT), request)


def error_message(code: Optional[str], default: str) -> str:
    """Explain a service error code, falling back to the raw message."""
    if code and code in ERROR_MESSAGES:
        return ERROR_MESSAGES[code]
    return default
