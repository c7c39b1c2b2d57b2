"""
Conversion of response models into webhook JSON.

Import ResponseSerializer from actions_core.io.serializer; this package
stays import-light so the schema modules can use the encoder.
"""
