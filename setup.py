from setuptools import setup

setup(
    name="lambdahttp",
    version="0.1.0",
    packages=["lambdahttp", "lambdahttp.clients"],
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=["boto3", "botocore"],
    extras_require={"test": ["pytest", "urllib3"]},
    description="A python sdk to call AWS Lambda functions as http endpoints",
    author="Saswata Dutta",
    author_email="saswat.dutta@gmail.com",
)
