import sys

from resilience_search.cli import main


sys.exit(main())
