#!/usr/bin/env python3
"""
SlotPoker - Server Startup Script

Usage:
    python run.py [--host HOST] [--port PORT] [--reload] [--log-level LEVEL]
"""

from slotpoker.server.app import main


if __name__ == "__main__":
    main()
