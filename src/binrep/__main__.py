import sys

from binrep.demo import main

sys.exit(main())
