#!/usr/bin/env python3

##############################################
#                                            #
#         MCP TOOL SCAFFOLDING               #
#                                            #
##############################################

import sys

from utils.cli import main

if __name__ == "__main__":
    sys.exit(main())
