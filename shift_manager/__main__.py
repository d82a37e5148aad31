import sys

from shift_manager.main import main

sys.exit(main())
