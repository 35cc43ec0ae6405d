"""
tests

Test suite for the xbee-io project.

Modules:
    - test_io_sample: IOSample decoding, validation and accessors
    - test_io_line: IOLine and IOValue enumerations
    - test_models: IOSampleModel snapshot model
    - test_config: Logging configuration helper
    - test_version: Installed version lookup
"""
