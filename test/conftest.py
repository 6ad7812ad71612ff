import os
import tempfile

# Must run before any ribbot module is imported: settings are read at import time.
test_corpus_dir = os.path.join(tempfile.gettempdir(), "ribbot_test_corpus_empty")
os.makedirs(test_corpus_dir, exist_ok=True)

os.environ.setdefault("RIBBOT_CORPUS_DIR", test_corpus_dir)
os.environ.setdefault("RIBBOT_SEED", "1234")
os.environ.setdefault("RIBBOT_LOG_LEVEL", "WARNING")
