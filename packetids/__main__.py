import sys

from packetids.fetch_packets import main

sys.exit(main())
