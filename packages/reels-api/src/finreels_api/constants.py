"""Shared constants for the reels API."""

# Used when the multipart part carries no content type
DEFAULT_UPLOAD_CONTENT_TYPE = "video/mp4"

SUCCESS_FEATURED = "Reel featured successfully"
SUCCESS_LIKED = "Reel liked successfully"

DEFAULT_HOST = "0.0.0.0"
