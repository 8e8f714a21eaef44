from setuptools import find_packages, setup


def readme():
    with open("README.md") as f:
        return f.read()

_EXTRAS = {
  "test": ["pytest>=7.0", "pytest-django>=4.5"],
}
_EXTRAS["all"] = sorted([req for req_list in _EXTRAS.values() for req in req_list])

setup(
    name="drf-flowchart",
    version="0.1.0",
    license="MIT",
    description="Django REST API for workflow nodes and links with a flowchart export",
    long_description=readme(),
    long_description_content_type="text/markdown",
    keywords="django flowchart workflow",
    packages=find_packages(exclude=["tests*"]),
    include_package_data=True,
    install_requires=[
        "Django>=3.2",
        "djangorestframework>=3.12",
        "drf-nested-routers>=0.93.4",
    ],
    extras_require=_EXTRAS,
    zip_safe=False,
)
