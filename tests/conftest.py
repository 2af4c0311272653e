import numpy as np
import pandas as pd
import pytest

FEATURES = ["fixed acidity", "volatile acidity", "alcohol"]


def make_wine_frame(n: int = 100, seed: int = 0) -> pd.DataFrame:
    """Small wine-like table where quality rises with alcohol."""
    rng = np.random.default_rng(seed)
    alcohol = rng.normal(10.5, 1.0, n)
    quality = np.clip(np.round(5.5 + 1.5 * (alcohol - 10.5) + rng.normal(0, 0.3, n)), 3, 9)
    return pd.DataFrame(
        {
            "fixed acidity": rng.normal(8.0, 1.5, n).round(2),
            "volatile acidity": rng.normal(0.5, 0.1, n).round(3),
            "alcohol": alcohol.round(2),
            "quality": quality.astype(int),
            "class": (quality > 5).astype(int),
        }
    )


@pytest.fixture
def wine_frame() -> pd.DataFrame:
    return make_wine_frame()


@pytest.fixture
def wine_csv(tmp_path, wine_frame):
    path = tmp_path / "wine.csv"
    wine_frame.to_csv(path, sep=";", index=False)
    return path


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "data.csv"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
