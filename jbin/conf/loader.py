# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from jbin.conf.settings import CodecSettings
from jbin.utils.yaml import load_yaml_settings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'JBIN_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_settings() -> CodecSettings:
    """ Return the settings used when decoding without explicit settings.

    The settings are loaded from the yaml file named by the environment variable 'JBIN_CONFIG_YAML', when it is not
    set the defaults of `CodecSettings` are used.
    """
    return _load_settings_singleton(os.environ.get(CONFIG_YAML_ENV_VAR))


def _load_settings_singleton(source: Optional[str]) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise RuntimeError('loading config twice with a different file')
        return _settings_singleton.settings

    if source is None:
        settings = CodecSettings()
    else:
        logger.info('loading settings', source=source)
        settings = load_yaml_settings(CodecSettings, source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings
