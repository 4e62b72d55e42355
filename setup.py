import setuptools

setuptools.setup(
	name='unicharset',
	version='0.1.0',
	packages=[
		'unicharset',
	],
	description='Sets of Unicode code points, with range compression and UTF-16 regular expression synthesis',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
    ],
)
