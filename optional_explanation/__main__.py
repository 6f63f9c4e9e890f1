import sys

from optional_explanation.demo import main


sys.exit(main())
