from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the catalog ingestion step.
    """

    raw_path: Path = Path("kondate/data/raw/recipes_export.csv")
    processed_data_dir: Path = Path("kondate/data")
    processed_filename: str = "recipes.csv"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
