from dataclasses import dataclass
from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the listing ingestion step.

    The raw file is an export of the listings table; the processed file is
    the candidate snapshot the ranking service loads.
    """

    raw_path: Path = _DATA_DIR / "raw" / "providers.csv"
    processed_data_dir: Path = _DATA_DIR / "processed"
    processed_filename: str = "providers.csv"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
