import importlib
import logging


# --------------------------------------------------------------------------------------------------
def get_logger():
    return logging.getLogger("handins")


# --------------------------------------------------------------------------------------------------
def get_class_from_string(s):
    module_name, class_name = s.rsplit(".", 1)
    return getattr(importlib.import_module(module_name), class_name)
