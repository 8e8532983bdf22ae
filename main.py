import sys

from sorting_visualizer.app import main

if __name__ == "__main__":
    sys.exit(main())
