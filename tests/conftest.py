import os

from bencodex.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['BENCODEX_CONFIG_YAML'] = os.environ.get('BENCODEX_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
