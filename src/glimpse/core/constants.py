"""Application-wide constants.

These are fixed values that don't change between environments.
For configurable values, see config.py Settings.
"""

# ─────────────────────────────────────────────────────────────
# Sentiment scoring
# ─────────────────────────────────────────────────────────────
INTENSIFIER_MULTIPLIER = 1.5
NEGATION_WINDOW = 2  # preceding words checked for a negator
CONFIDENCE_BOOST = 0.2
MIN_SENTENCE_CONFIDENCE = 0.3
MAX_SENTENCE_CONFIDENCE = 0.95
SENTENCE_DISPLAY_LENGTH = 100
POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1

# ─────────────────────────────────────────────────────────────
# Text statistics
# ─────────────────────────────────────────────────────────────
WORDS_PER_MINUTE = 200
MIN_CONTENT_WORD_LENGTH = 3  # tokens shorter than this are noise
DEFAULT_MAX_PHRASES = 10

# ─────────────────────────────────────────────────────────────
# Image classification
# ─────────────────────────────────────────────────────────────
IMAGE_MAX_DIMENSION = 224
COLOR_BUCKET_SIZE = 32
DOMINANT_COLOR_COUNT = 5
MAX_PREDICTIONS = 3
RANK_CONFIDENCE_STEP = 0.03
MIN_PREDICTION_CONFIDENCE = 0.1
MAX_PREDICTION_CONFIDENCE = 0.95
FILENAME_HINT_CONFIDENCE = 0.95
FILENAME_PERSON_HINTS = ("person", "human", "face", "portrait", "selfie", "photo")

# Feature-presence thresholds (fraction of pixels)
FLESH_TONE_PRESENT = 0.05
FACE_STRUCTURE_PRESENT = 0.03
HAIR_TEXTURE_PRESENT = 0.05
CLOTHING_COLORS_PRESENT = 0.1
ANIMAL_FEATURES_PRESENT = 0.2

# ─────────────────────────────────────────────────────────────
# Upload limits (defaults for Settings)
# ─────────────────────────────────────────────────────────────
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_MAX_TEXT_CHARS = 1_000_000
DEFAULT_IMAGE_DECODE_TIMEOUT = 10.0
DEFAULT_WORD_FREQUENCY_LIMIT = 50
DEFAULT_KEY_PHRASE_LIMIT = 8
DEFAULT_PDF_MAX_PAGES = 50  # later pages are not read
