# WORDPASS Business Logic Services
from app.services.passphrase import PassphraseGenerator
from app.services.strength import Strength, score_password

__all__ = ["PassphraseGenerator", "Strength", "score_password"]
