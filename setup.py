# Copyright 2024 Bytedance Ltd. and/or its affiliates
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

from setuptools import find_packages, setup

setup(
    name="binoxxo",
    version="1.0.0",
    description="Binoxxo (Takuzu/Binairo) rules engine and puzzle generator",
    long_description=open("README.md", encoding="utf-8").read() if __import__("pathlib").Path("README.md").exists() else "",
    long_description_content_type="text/markdown",
    author="binoxxo Team",
    license="Apache-2.0",
    packages=find_packages(where=".", include=["binoxxo", "binoxxo.*"]),
    package_dir={"": "."},
    package_data={"binoxxo": ["configs/*.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "Pillow>=9.2",
        "PyYAML",
        "pydantic>=2",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["binoxxo=binoxxo.cli:main"],
    },
    include_package_data=True,
)
