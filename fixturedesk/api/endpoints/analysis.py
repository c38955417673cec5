from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from fixturedesk.api.dependencies import get_classification_service
from fixturedesk.models.analysis_model import ClassificationResult
from fixturedesk.services.classification_service import ClassificationService

router = APIRouter()

@router.post("", response_model=ClassificationResult)
def analyze_image(
    image: UploadFile = File(...),
    service: ClassificationService = Depends(get_classification_service),
):
    media_type = image.content_type or ""
    if not media_type.startswith("image/"):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please upload an image file.")

    content = image.file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="The uploaded image is empty.")

    return service.analyze_image(content, media_type)
