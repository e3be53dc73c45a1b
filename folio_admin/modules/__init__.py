"""
Folio Admin Modules
===================

Each module is a Flask blueprint registered by FolioAdmin.
"""
