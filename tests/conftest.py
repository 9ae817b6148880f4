import os
import sys
from pathlib import Path

# Disable artificial delays during tests for faster execution
os.environ.setdefault("SHIP_HUNTERS_TURN_DELAY", "0")
os.environ.setdefault("SHIP_HUNTERS_SETUP_DELAY", "0")
os.environ.setdefault("SHIP_HUNTERS_CLEAR_SCREEN", "0")

sys.path.append(str(Path(__file__).resolve().parents[1]))
