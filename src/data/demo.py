import numpy as np

# Synthetic monthly variance feed shaped like the live dataset: a seasonal
# swing plus a slow warming trend around the base temperature.

BASE_TEMPERATURE = 8.66


def synthetic_dataset(start_year: int = 1753, end_year: int = 2015) -> dict:
    years = np.arange(start_year, end_year + 1)
    months = np.arange(1, 13)
    yy, mm = np.meshgrid(years, months, indexing="ij")
    # Northern-hemisphere land dominates: cold January, warm July
    seasonal = 6.5 * np.sin((mm - 4) / 12 * 2 * np.pi) - 2.0
    trend = 1.4 * (yy - start_year) / max(end_year - start_year, 1)
    variance = np.round(seasonal + trend - 0.7, 3)
    entries = [
        {"year": int(y), "month": int(m), "variance": float(v)}
        for y, m, v in zip(yy.ravel(), mm.ravel(), variance.ravel())
    ]
    return {"baseTemperature": BASE_TEMPERATURE, "monthlyVariance": entries}
