"""Setup aws_lambda_router."""

from setuptools import find_packages, setup

with open("README.md") as f:
    readme = f.read()


extra_reqs = {"test": ["pytest", "pytest-cov", "mock"]}


setup(
    name="aws-lambda-router",
    version="1.0.0",
    description="Origin and path based HTTP routing for AWS Lambda",
    long_description=readme,
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="AWS-Lambda API-Gateway HTTP Router",
    author="Lucas Messenger",
    author_email="1335960+layertwo@users.noreply.github.com",
    url="https://github.com/layertwo/aws-lambda-router",
    license="BSD",
    packages=find_packages(exclude=["ez_setup", "example", "tests"]),
    include_package_data=True,
    zip_safe=False,
    extras_require=extra_reqs,
)
