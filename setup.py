from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SeqArray",
    version=version,
    description="Arrays with a javascript-like chainable interface",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    keywords=['array', 'list', 'sequence', 'splice', 'functional'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=['tests', 'docs']),
    python_requires='>=3.8',
    install_requires=[
        'tblib>=1.7'],
    extras_require={
        'tests': [
            'pytest', 'coverage']
    }
)
