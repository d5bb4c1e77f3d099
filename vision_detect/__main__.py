import sys

from vision_detect.main import main

sys.exit(main())
