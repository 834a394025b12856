import sys

from pit_snake.cli import main

sys.exit(main())
