"""Back up and remove the data file so the server re-seeds it with the default grid on next start."""
import os
import shutil
import sys
import time

from app.config import settings


def reset(path: str) -> int:
    if not os.path.exists(path):
        print(f"{path} does not exist, nothing to reset")
        return 0

    directory = os.path.dirname(os.path.abspath(path))
    backup = os.path.join(directory, f"data.backup.{int(time.time() * 1000)}.json")
    shutil.copyfile(path, backup)
    print(f"Backup created: {backup}")

    os.unlink(path)
    print(f"Removed {path}; it will be recreated with the default schedule on next start")
    return 0


if __name__ == "__main__":
    sys.exit(reset(sys.argv[1] if len(sys.argv) > 1 else settings.DATA_FILE))
