from .base.portal import Portal

from .handins import Handins
