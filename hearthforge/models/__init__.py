from hearthforge.models.card import CardMetadata, Rarity
from hearthforge.models.deck import (
    DeckDifference,
    DeckSkeleton,
    Format,
    GameFormat,
    RawDeckData,
    Sideboard,
)
from hearthforge.models.failure import (
    ApiResponse,
    DeckCodeError,
    FailureDetail,
    FailureKind,
    KnownError,
    MalformedBase64Error,
    OutcomeType,
    TruncatedInputError,
    UnsupportedFormatError,
    VarintOverflowError,
)

__all__ = [
    "ApiResponse",
    "CardMetadata",
    "DeckCodeError",
    "DeckDifference",
    "DeckSkeleton",
    "FailureDetail",
    "FailureKind",
    "Format",
    "GameFormat",
    "KnownError",
    "MalformedBase64Error",
    "OutcomeType",
    "RawDeckData",
    "Rarity",
    "Sideboard",
    "TruncatedInputError",
    "UnsupportedFormatError",
    "VarintOverflowError",
]
