"""Mocha test spec generation from Swagger/OpenAPI documents."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
