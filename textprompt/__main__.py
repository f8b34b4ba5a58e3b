import sys

from textprompt.api.main import main

sys.exit(main())
