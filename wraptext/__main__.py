import sys

from wraptext.cli import main

sys.exit(main())
