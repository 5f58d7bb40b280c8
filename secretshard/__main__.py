import sys

from secretshard.cli import main

sys.exit(main())
