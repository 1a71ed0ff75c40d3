import sys

from securepad.cli import main

sys.exit(main())
