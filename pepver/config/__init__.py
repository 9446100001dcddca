# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration loading for pepver.

Built-in defaults are deep-merged with an optional `pepver.yaml` (given
explicitly or found by walking upward from the working directory).

Example:
    Basic usage:
        ```python
        from pathlib import Path
        from pepver.config import load_effective_config

        config = load_effective_config(Path("pepver.yaml"))
        print(config["output"]["format"])  # "json"
        ```
"""

from .loader import DEFAULT_CONFIG, load_effective_config

__all__ = ["DEFAULT_CONFIG", "load_effective_config"]
