import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from fastapi import UploadFile, HTTPException

from ..ports.medical_test_repo import MedicalTestRepository, MedicalTestRecord
from ..ports.ai_provider import AIProvider
from ..ports.object_storage import ObjectStorage
from .. import prompts
from ...config import settings
from ...media_utils import detect_image_mime

logger = logging.getLogger(__name__)

KEY_PREFIX = "medical-tests"


def object_key_for(user_id: str, filename: str) -> str:
    """Object-store key for an uploaded test image, unique per millisecond."""
    timestamp_ms = int(datetime.now(timezone.utc).timestamp() * 1000)
    return f"{KEY_PREFIX}/{user_id}/{timestamp_ms}-{filename}"


def user_key_prefix(user_id: str) -> str:
    return f"{KEY_PREFIX}/{user_id}/"


@dataclass
class MedicalTestService:
    test_repo: MedicalTestRepository
    ai_provider: AIProvider
    storage: ObjectStorage

    def analyze_upload(self, user_id: str, image: Optional[UploadFile], test_type: Optional[str], test_date: Optional[str] = None) -> MedicalTestRecord:
        if image is None or not image.filename or not test_type:
            raise HTTPException(status_code=400, detail="Image and test type are required")

        if test_date:
            try:
                datetime.strptime(test_date, "%Y-%m-%d")
            except ValueError:
                raise HTTPException(status_code=400, detail="Invalid test_date format. Use YYYY-MM-DD")
        else:
            test_date = datetime.now(timezone.utc).date().isoformat()

        image.file.seek(0, 2)
        file_size = image.file.tell()
        image.file.seek(0)
        if file_size > settings.MAX_FILE_SIZE:
            raise HTTPException(status_code=413, detail=f"File too large (max {settings.MAX_FILE_SIZE // (1024*1024)}MB)")

        content = image.file.read()
        if not content:
            raise HTTPException(status_code=400, detail="Image and test type are required")

        mime_type = image.content_type
        if not mime_type or mime_type == "application/octet-stream":
            mime_type = detect_image_mime(content)
        if mime_type not in settings.ALLOWED_IMAGE_TYPES:
            raise HTTPException(status_code=415, detail=f"File type {mime_type} not allowed")

        filename = os.path.basename(image.filename)
        key = object_key_for(user_id, filename)
        self.storage.put(key, content, mime_type)
        logger.info(f"Stored medical test image {key} ({file_size} bytes)")

        analysis = self.ai_provider.generate_text(
            prompts.MEDICAL_TEST_SYSTEM_PROMPT,
            prompts.medical_test_user_prompt(test_type),
            image_bytes=content,
            mime_type=mime_type,
        )
        if not analysis:
            analysis = prompts.IMAGE_ANALYSIS_FALLBACK

        return self.test_repo.create(
            user_id=user_id,
            test_type=test_type,
            test_date=test_date,
            image_url=key,
            original_filename=filename,
            ai_analysis=analysis,
        )
