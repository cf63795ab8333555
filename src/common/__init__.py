# Common library for the MOT Refund Service.
# Authentication, permissions, pagination, middleware, validators,
# model mixins and the API exception handler live here.

__version__ = "1.0.0"
