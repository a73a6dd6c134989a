# /run.py

import subprocess
import os
import sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def run_streamlit():
  subprocess.run([sys.executable, "-m", "streamlit", "run", "storefront/app.py", "--server.port", "5000", "--server.address", "0.0.0.0"], cwd=BASE_DIR)


if __name__ == "__main__":
  run_streamlit()
