import sys

from skill_registry.cli import main

sys.exit(main())
