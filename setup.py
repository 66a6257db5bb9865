import os
from setuptools import setup
from cas_validator import VERSION

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as readme:
    README = readme.read()

if __name__ == '__main__':
    # allow setup.py to be run from any path
    os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

    setup(
        name='django-cas-validator',
        version=VERSION,
        packages=[
            'cas_validator', 'cas_validator.management', 'cas_validator.management.commands',
            'cas_validator.tests',
        ],
        include_package_data=True,
        license='GPLv3',
        description=(
            'A Django application validating Central Authentication Service '
            'service tickets (CAS 1.0 and CAS 2.0+)'
        ),
        long_description=README,
        author='Valentin Samir',
        author_email='valentin.samir@crans.org',
        classifiers=[
            'Environment :: Web Environment',
            'Development Status :: 5 - Production/Stable',
            'Framework :: Django',
            'Framework :: Django :: 3.2',
            'Framework :: Django :: 4.2',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: Internet :: WWW/HTTP',
            'Topic :: System :: Systems Administration :: Authentication/Directory'
        ],
        keywords=['django', 'cas', 'cas2', 'client', 'sso', 'single sign-on', 'authentication', 'auth'],
        install_requires=[
            'Django >= 3.2', 'requests >= 2.4', 'lxml >= 3.4',
        ],
        extras_require={
            'test': ['pytest', 'pytest-django', 'mock>=1'],
        },
        zip_safe=False,
    )
