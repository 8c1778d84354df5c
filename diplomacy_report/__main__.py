import sys

from diplomacy_report.reformat import main

sys.exit(main())
