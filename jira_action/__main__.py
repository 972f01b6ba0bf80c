import sys

from jira_action.main import main

sys.exit(main())
