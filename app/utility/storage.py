import enum
import logging
import os
import shutil
import tempfile
import uuid
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from supabase import create_client, Client

from app.config.environments import (
    SUPABASE_PROJECT_URL,
    SUPABASE_SERVICE_KEY,
    MEDIA_IMAGE_BUCKET,
    MEDIA_VIDEO_BUCKET,
    MEDIA_ROOT_FOLDER,
)
from app.utility.video import get_video_duration

logger = logging.getLogger("uvicorn")

CHUNK_SIZE = 1024 * 1024


class MediaKind(str, enum.Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass
class UploadResult:
    url: str
    path: str
    duration: Optional[float] = None


def media_folder(*parts) -> str:
    """videohub/{userId}/... layout shared by every stored asset."""
    return "/".join([MEDIA_ROOT_FOLDER, *(str(part) for part in parts)])


def extract_storage_path(file_url: str, bucket: str) -> Optional[str]:
    """
    Turn a public storage URL back into the object path inside its bucket.

    https://<project>.supabase.co/storage/v1/object/public/videos/videohub/1/ab/x.mp4
    -> videohub/1/ab/x.mp4
    """
    if not file_url:
        return None

    marker = f"/object/public/{bucket}/"
    if marker in file_url:
        return file_url.split(marker, 1)[1].split("?", 1)[0]

    if file_url.startswith("http"):
        return None

    return file_url


class MediaHost:
    """
    Supabase Storage wrapper.

    Every call reports failure through its return value (None / False) instead of
    raising, callers decide whether a failure aborts the request.
    """

    def __init__(self, client: Client, image_bucket: str = MEDIA_IMAGE_BUCKET,
                 video_bucket: str = MEDIA_VIDEO_BUCKET):
        self.client = client
        self.image_bucket = image_bucket
        self.video_bucket = video_bucket

    def bucket_for(self, kind: MediaKind) -> str:
        return self.video_bucket if kind is MediaKind.VIDEO else self.image_bucket

    def _upload_bytes(self, bucket: str, path: str, content: bytes, content_type: str) -> str:
        self.client.storage.from_(bucket).upload(
            path=path,
            file=content,
            file_options={
                "content-type": content_type,
                "upsert": "false"  # Don't overwrite existing files
            }
        )
        return self.client.storage.from_(bucket).get_public_url(path)

    async def upload(self, file: UploadFile, folder: str, kind: MediaKind) -> Optional[UploadResult]:
        """
        Upload an incoming file under `folder`.

        Videos are spooled to a temporary file first so ffprobe can read the duration.

        Returns:
            UploadResult with the public URL, or None if the upload failed
        """
        suffix = Path(file.filename or "").suffix
        path = f"{folder}/{uuid.uuid4().hex}{suffix}"
        bucket = self.bucket_for(kind)

        temp_dir = tempfile.mkdtemp()
        temp_path = os.path.join(temp_dir, f"upload{suffix}")

        try:
            with open(temp_path, "wb") as buffer:
                while chunk := await file.read(CHUNK_SIZE):
                    buffer.write(chunk)

            duration = None
            if kind is MediaKind.VIDEO:
                duration = await run_in_threadpool(get_video_duration, temp_path)

            with open(temp_path, "rb") as f:
                content = f.read()

            url = await run_in_threadpool(
                self._upload_bytes,
                bucket,
                path,
                content,
                file.content_type or "application/octet-stream",
            )

        except Exception as e:
            logger.error(f"Failed to upload {file.filename} to {bucket}/{path}: {e}")
            return None

        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

        return UploadResult(url=url, path=path, duration=duration)

    async def delete_by_url(self, file_url: str, kind: MediaKind) -> bool:
        bucket = self.bucket_for(kind)
        path = extract_storage_path(file_url, bucket)
        if not path:
            return False

        try:
            await run_in_threadpool(self.client.storage.from_(bucket).remove, [path])
            return True

        except Exception as e:
            logger.warning(f"Error deleting {path} from {bucket}: {e}")
            return False

    async def delete_folder(self, folder: str) -> bool:
        """Remove every object directly under `folder` in both buckets."""
        ok = True
        for bucket in (self.image_bucket, self.video_bucket):
            try:
                storage = self.client.storage.from_(bucket)
                entries = await run_in_threadpool(storage.list, folder)
                paths = [f"{folder}/{entry['name']}" for entry in entries or []]
                if paths:
                    await run_in_threadpool(storage.remove, paths)

            except Exception as e:
                logger.warning(f"Error deleting folder {folder} from {bucket}: {e}")
                ok = False

        return ok


@lru_cache
def get_media_host() -> MediaHost:
    return MediaHost(create_client(SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY))
