"""
                Food Order App

A console walkthrough for ordering food: registration, menu selection,
delivery address, simulated card payment and order confirmation.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"
