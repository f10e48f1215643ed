from string import Template

from pydantic import BaseModel


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str

    class Config:
        extra = "forbid"

    def render(self, **values: str) -> str:
        """Fill ``$name`` placeholders. Exactly the declared inputs are accepted."""
        missing = set(self.inputs) - set(values)
        unexpected = set(values) - set(self.inputs)
        if missing or unexpected:
            raise ValueError(
                f"Prompt '{self.name}' expects inputs {sorted(self.inputs)}, "
                f"missing={sorted(missing)}, unexpected={sorted(unexpected)}"
            )
        return Template(self.template).substitute(values)
