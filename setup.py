from setuptools import find_packages, setup

package_name = 'agv_conflict_resolver'

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
        'pyyaml',
        'nudged',
    ],
    zip_safe=True,
    maintainer='hansoo',
    maintainer_email='hansoo@todo.todo',
    description='AGV path conflict prediction and resolution engine',
    license='Apache-2.0',
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'agv_conflict_resolver = '
            'agv_conflict_resolver.presentation.main:main',
        ],
    },
)
