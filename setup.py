from setuptools import find_packages, setup

package_name = 'pallet_quote'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test', 'test.*']),
    package_data={
        package_name: ['config/*.yaml'],
    },
    python_requires='>=3.11',
    install_requires=[
        'setuptools',
        'numpy',
        'paho-mqtt>=2.0',
        'pyyaml',
        'requests',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='AR pallet dimension scanning and freight quote client',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'pallet-quote = pallet_quote.presentation.main:main',
        ],
    },
)
