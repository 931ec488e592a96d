"""
Object key and media URL conventions.

Single source of truth: the publish pipeline builds keys and URLs, and the feed reader
rebuilds URLs from stored records, using only these functions.

Upload key:        reels/{stock_identifier}_{reel_id}.mp4
HLS output prefix: reels/{stock_identifier}_{reel_id}/
HLS manifest key:  reels/{stock_identifier}_{reel_id}/index.m3u8
"""

_UPLOAD_KEY_PREFIX = "reels/"
_UPLOAD_KEY_SUFFIX = ".mp4"
HLS_MANIFEST_BASENAME = "index"
_HLS_MANIFEST_NAME = f"{HLS_MANIFEST_BASENAME}.m3u8"


def build_upload_key(stock_identifier: str, reel_id: str) -> str:
    """Build the object key for the original upload."""
    return f"{_UPLOAD_KEY_PREFIX}{stock_identifier}_{reel_id}{_UPLOAD_KEY_SUFFIX}"


def build_hls_prefix(stock_identifier: str, reel_id: str) -> str:
    """Build the per-reel directory (with trailing slash) the transcode job writes to."""
    return f"{_UPLOAD_KEY_PREFIX}{stock_identifier}_{reel_id}/"


def hls_manifest_key_for(upload_key: str) -> str:
    """
    Return the HLS manifest key that the transcode job produces for an upload key.

    reels/ACME_<uuid>.mp4 -> reels/ACME_<uuid>/index.m3u8
    """
    stem = upload_key[: -len(_UPLOAD_KEY_SUFFIX)] if upload_key.endswith(_UPLOAD_KEY_SUFFIX) else upload_key
    return f"{stem}/{_HLS_MANIFEST_NAME}"


def s3_uri(bucket: str, key: str) -> str:
    """Return s3://bucket/key."""
    return f"s3://{bucket}/{key}"


def build_media_url(public_base_url: str, upload_key: str, *, transcoded: bool) -> str:
    """
    Build the playable URL for a reel.

    Direct mode points at the raw upload. Transcoded mode points at the HLS manifest the
    (still running) transcode job is expected to write; it may not exist yet.
    """
    base = public_base_url.rstrip("/")
    key = hls_manifest_key_for(upload_key) if transcoded else upload_key
    return f"{base}/{key}"
