import sys

from fs_transcript.main import main

if __name__ == "__main__":
    sys.exit(main())
