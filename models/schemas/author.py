from models.schemas.common import FormSchema, required_name, optional_date


class AuthorFormSchema(FormSchema):
    first_name = required_name("First name")
    family_name = required_name("Family name")
    date_of_birth = optional_date("Invalid date of birth")
    date_of_death = optional_date("Invalid date of death")
