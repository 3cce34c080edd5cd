"""Basketball team catalog: loading team data, querying it and the interactive front end."""