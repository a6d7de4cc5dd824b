import os
import sys
from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Set environment variables for testing
os.environ["PARALLEL_WORKERS"] = "4"
os.environ["PARALLEL_THREAD_PREFIX"] = "test-worker"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_USE_COLOR"] = "false"
os.environ["LOG_DIR"] = "/tmp/test-logs"
