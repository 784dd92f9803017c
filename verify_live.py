import argparse
import logging

from src.config import CANVAS_HEIGHT, DATASET_URL
from src.data.dataset import fetch_dataset
from src.heatmap.layout import compute_layout


def main():
    parser = argparse.ArgumentParser(description="Verify live access to the temperature variance feed.")
    parser.add_argument("--url", type=str, default=DATASET_URL)
    parser.add_argument("--height", type=float, default=CANVAS_HEIGHT)
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )
    logging.info("Fetching dataset from %s", args.url)
    dataset = fetch_dataset(args.url)
    print("entries", len(dataset.monthly_variance))
    print("years", dataset.min_year, "-", dataset.max_year, f"({len(dataset.years())} distinct)")
    print("base temperature", dataset.base_temperature)

    layout = compute_layout(dataset, args.height)
    print("grid width", layout.width, "row height", round(layout.row_height, 2))
    print("cells", len(layout.cells), "year ticks", [t.label for t in layout.x_ticks])
    colors = {}
    for cell in layout.cells:
        colors[cell.color] = colors.get(cell.color, 0) + 1
    for entry in layout.legend:
        print("band", entry.label.ljust(10), entry.color.ljust(20), colors.get(entry.color, 0))


if __name__ == "__main__":
    main()
