import sys

from counter_mvvm.main import main

sys.exit(main())
