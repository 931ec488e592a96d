"""
MediaConvert implementation of TranscodeJobSubmitter.

MediaConvert requires an account-specific endpoint. An explicit endpoint_url is used
when given; otherwise it is discovered with DescribeEndpoints on first use. Jobs are
fire-and-forget: the submitter returns the job id and never polls for completion.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import boto3
from botocore.exceptions import ClientError
from finreels_shared import TranscodeProfile
from finreels_shared.keys import HLS_MANIFEST_BASENAME

from .client_config import client_config

logger = logging.getLogger(__name__)


def discover_mediaconvert_endpoint(
    region_name: str | None = None,
    *,
    client: Any | None = None,
) -> str:
    """
    Return the account-specific MediaConvert endpoint URL for the region.

    Raises RuntimeError when DescribeEndpoints returns no endpoint.
    """
    probe = client or boto3.client("mediaconvert", region_name=region_name)
    resp = probe.describe_endpoints(MaxResults=1)
    endpoints = resp.get("Endpoints") or []
    url = endpoints[0].get("Url") if endpoints else None
    if not url:
        raise RuntimeError(
            "Could not discover MediaConvert endpoint; set MEDIACONVERT_ENDPOINT"
        )
    logger.info("mediaconvert endpoint discovered region=%s url=%s", region_name, url)
    return url


def _destination(output_s3_prefix: str) -> str:
    """
    HLS destination for a per-reel directory. MediaConvert names the master manifest
    after the last path component, so append the manifest base name to get index.m3u8.
    """
    if output_s3_prefix.endswith("/"):
        return f"{output_s3_prefix}{HLS_MANIFEST_BASENAME}"
    return output_s3_prefix


def build_job_settings(
    input_s3_uri: str,
    output_s3_prefix: str,
    profile: TranscodeProfile,
) -> dict[str, Any]:
    """Build the MediaConvert job Settings document for one input and one HLS output group."""
    return {
        "Inputs": [
            {
                "FileInput": input_s3_uri,
                "VideoSelector": {"ColorSpace": "FOLLOW"},
                "AudioSelectors": {
                    "Audio Selector 1": {"DefaultSelection": "DEFAULT"},
                },
            }
        ],
        "OutputGroups": [
            {
                "Name": profile.output_group_name,
                "OutputGroupSettings": {
                    "Type": "HLS_GROUP_SETTINGS",
                    "HlsGroupSettings": {
                        "SegmentLength": profile.segment_length_seconds,
                        "MinSegmentLength": 0,
                        "Destination": _destination(output_s3_prefix),
                    },
                },
                "Outputs": [
                    {
                        "NameModifier": "_hls",
                        "VideoDescription": {
                            "CodecSettings": {
                                "Codec": profile.video_codec,
                                "H264Settings": {
                                    "RateControlMode": profile.rate_control_mode,
                                    "SceneChangeDetect": profile.scene_change_detect,
                                    "QualityTuningLevel": profile.quality_tuning_level,
                                },
                            }
                        },
                        "AudioDescriptions": [
                            {
                                "AudioSourceName": "Audio Selector 1",
                                "CodecSettings": {
                                    "Codec": profile.audio_codec,
                                    "AacSettings": {
                                        "Bitrate": profile.audio_bitrate,
                                        "CodingMode": profile.audio_coding_mode,
                                        "SampleRate": profile.audio_sample_rate,
                                    },
                                },
                            }
                        ],
                        "ContainerSettings": {
                            "Container": profile.container,
                            "M3u8Settings": {},
                        },
                    }
                ],
            }
        ],
    }


class MediaConvertJobSubmitter:
    """
    TranscodeJobSubmitter implementation using AWS Elemental MediaConvert.

    Without an explicit endpoint_url the client is built on the first submit, after
    discovering the endpoint, so discovery runs under the caller's time bound and a
    failed discovery is retried on the next submit.
    """

    def __init__(
        self,
        role_arn: str,
        *,
        region_name: str | None = None,
        endpoint_url: str | None = None,
        timeout_seconds: float | None = None,
        client: Any | None = None,
    ) -> None:
        self._role_arn = role_arn
        self._region_name = region_name
        self._endpoint_url = endpoint_url
        self._config = client_config(timeout_seconds)
        self._client = client
        self._client_lock = threading.Lock()

    def _get_client(self) -> Any:
        with self._client_lock:
            if self._client is not None:
                return self._client
            endpoint_url = self._endpoint_url
            if not endpoint_url:
                probe = boto3.client(
                    "mediaconvert", region_name=self._region_name, config=self._config
                )
                try:
                    endpoint_url = discover_mediaconvert_endpoint(self._region_name, client=probe)
                except ClientError as e:
                    raise RuntimeError(f"Could not discover MediaConvert endpoint: {e}") from e
            self._client = boto3.client(
                "mediaconvert",
                region_name=self._region_name,
                endpoint_url=endpoint_url,
                config=self._config,
            )
            return self._client

    def submit(
        self,
        input_s3_uri: str,
        output_s3_prefix: str,
        profile: TranscodeProfile,
    ) -> str:
        """Create the job and return its id. Raises ClientError if MediaConvert rejects it."""
        resp = self._get_client().create_job(
            Role=self._role_arn,
            Settings=build_job_settings(input_s3_uri, output_s3_prefix, profile),
        )
        job_id = resp["Job"]["Id"]
        logger.info("mediaconvert job submitted job_id=%s input=%s", job_id, input_s3_uri)
        return job_id
