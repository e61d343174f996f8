import sys

from subject_classifier.cli.main import main

sys.exit(main())
