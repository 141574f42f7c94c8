from setuptools import setup

install_requires = ["pydantic>=2.0", "pydantic-settings>=2.0"]

setup(
    name='apn-notifications',
    version='0.1.0',
    install_requires=install_requires,
    extras_require={'test': ["pytest"]},
    packages=['apn_notifications'],
    python_requires='>=3.8',
    license='MIT',
    description='Apple Push Notification payloads and legacy binary frames'
)
