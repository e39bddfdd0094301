#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
netcfg_core.asgi
~~~~~~~~~~~~~~~~
the interfaces editor API

run this from uvicorn or gunicorn
"""

import os

from netcfg_core.app import create_app

debug = os.getenv("NETCFG_CORE_DEBUG", "False").lower() == "true"

app = create_app(debug=debug)
