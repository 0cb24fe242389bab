import sys

from documentstack.cli import main

sys.exit(main())
