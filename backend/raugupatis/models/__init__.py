from raugupatis.models.batch import Batch, Photo, TasteProfile, TemperatureLog
from raugupatis.models.profile import FermentationProfile
from raugupatis.models.user import User

__all__ = [
    "Batch",
    "FermentationProfile",
    "Photo",
    "TasteProfile",
    "TemperatureLog",
    "User",
]
