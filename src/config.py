from dotenv import load_dotenv
import os

load_dotenv()

DATASET_URL = os.getenv(
    "DATASET_URL",
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/master/global-temperature.json",
)
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "20"))
CELL_WIDTH = float(os.getenv("CELL_WIDTH", "10"))
ROW_GUTTER = float(os.getenv("ROW_GUTTER", "4"))
CANVAS_HEIGHT = float(os.getenv("CANVAS_HEIGHT", "600"))
LABEL_WIDTH = int(os.getenv("LABEL_WIDTH", "75"))
