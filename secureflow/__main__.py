import sys

from secureflow.cli import main

sys.exit(main())
