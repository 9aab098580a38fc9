import cattrs

converter = cattrs.Converter()
