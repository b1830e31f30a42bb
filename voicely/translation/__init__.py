from voicely.translation.base import BaseTranslationProvider
from voicely.translation.factory import TranslationGatewayFactory
from voicely.translation.gateway import TranslationGateway

__all__ = ["BaseTranslationProvider", "TranslationGateway", "TranslationGatewayFactory"]
