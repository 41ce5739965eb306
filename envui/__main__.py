#!/usr/bin/env python
# coding: utf-8

import sys

from loguru import logger

logger.remove()
from .cli import run

def main():
    sys.exit(run(sys.argv[1:]))

if __name__ == '__main__':
    main()
