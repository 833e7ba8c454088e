"""Static rule tables for local resume synthesis.

Placeholders are ``str.format`` fields: ``{skills}``, ``{years}``, ``{role}``,
``{techs}``, ``{name}``, ``{title}``, ``{position}``, ``{degree}``, ``{field}``.
"""

from __future__ import annotations

GENERIC_SUMMARY = (
    "Professional with expertise in various fields. Committed to delivering "
    "high-quality results and continuous learning."
)

FRESHER_SUMMARIES: dict[str, str] = {
    "Software Engineer": (
        "Recent Computer Science graduate with strong foundation in {skills}. Passionate about "
        "developing innovative software solutions and eager to apply academic knowledge to "
        "real-world challenges. Seeking to contribute fresh perspectives and grow within a "
        "dynamic development team."
    ),
    "Frontend Developer": (
        "Creative and detail-oriented graduate with expertise in {skills}. Passionate about "
        "creating intuitive user interfaces and exceptional user experiences. Eager to apply "
        "modern frontend development skills to build engaging web applications."
    ),
    "Backend Developer": (
        "Analytical and problem-solving graduate with strong foundation in {skills}. Passionate "
        "about building robust server-side applications and optimizing system performance. "
        "Seeking to apply backend development skills to create scalable solutions."
    ),
    "Full Stack Developer": (
        "Versatile and motivated graduate with comprehensive skills in {skills}. Passionate about "
        "end-to-end development and creating complete web solutions. Eager to contribute to both "
        "frontend and backend development projects."
    ),
    "Data Scientist": (
        "Analytical graduate with strong foundation in {skills} and statistical analysis. "
        "Passionate about extracting insights from data and building predictive models. Seeking "
        "to apply data science skills to solve complex business problems."
    ),
    "Product Manager": (
        "Strategic and communication-focused graduate with understanding of {skills}. Passionate "
        "about product development and user-centric solutions. Eager to apply analytical and "
        "leadership skills to drive product success."
    ),
}

FRESHER_SUMMARY_FALLBACK = (
    "Recent {role} graduate with strong foundation in {skills}. Eager to apply academic "
    "knowledge and passion for technology to contribute to innovative projects and grow within "
    "a dynamic team."
)

EXPERIENCED_SUMMARIES: dict[str, str] = {
    "Software Engineer": (
        "Results-driven Software Engineer with {years}+ years of experience in {skills}. Proven "
        "track record of delivering high-quality software solutions and leading development "
        "projects. Passionate about code optimization, mentorship, and implementing best practices."
    ),
    "Frontend Developer": (
        "Creative Frontend Developer with {years}+ years of expertise in {skills}. Specialized in "
        "building responsive, user-centric interfaces and enhancing user experience. Committed to "
        "staying current with frontend trends and accessibility standards."
    ),
    "Backend Developer": (
        "Experienced Backend Developer with {years}+ years specializing in {skills}. Expert in "
        "designing scalable architectures, optimizing database performance, and implementing "
        "robust API solutions. Focus on system reliability and security."
    ),
    "Full Stack Developer": (
        "Versatile Full Stack Developer with {years}+ years of comprehensive experience in "
        "{skills}. Proven ability to handle end-to-end development from concept to deployment. "
        "Passionate about creating seamless user experiences and robust backend systems."
    ),
    "Data Scientist": (
        "Experienced Data Scientist with {years}+ years in {skills} and machine learning. Expert "
        "in data analysis, model development, and generating actionable insights. Track record of "
        "driving data-driven decision making and business value."
    ),
    "Product Manager": (
        "Strategic Product Manager with {years}+ years of experience in product lifecycle "
        "management. Skilled in cross-functional collaboration, user research, and driving product "
        "vision. Proven ability to deliver products that meet market needs and business objectives."
    ),
}

EXPERIENCED_SUMMARY_FALLBACK = (
    "Experienced {role} with expertise in {skills}. Proven track record of delivering "
    "high-quality solutions and driving project success."
)

OBJECTIVE_TEMPLATE = (
    "Recent graduate seeking an entry-level {role} position to leverage academic background in "
    "{field} and technical skills in {skills}."
)

# Ordered: the first category whose keywords match wins.
PROJECT_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("E-commerce", ("ecommerce", "e-commerce", "shop", "store")),
    ("Social Media", ("social", "chat", "messaging")),
    ("AI/ML", ("ai", "machine", "ml", "prediction")),
    ("Mobile App", ("mobile", "ios", "android")),
    ("Dashboard", ("dashboard", "analytics", "visualization")),
    ("Web App", ("web", "website", "portal")),
)

PROJECT_DESCRIPTIONS: dict[str, str] = {
    "E-commerce": (
        "Developed a full-featured e-commerce platform utilizing {techs}. Implemented secure payment "
        "processing, user authentication, and responsive design to deliver seamless shopping "
        "experience. Engineered scalable architecture supporting high-traffic transactions and "
        "real-time inventory management."
    ),
    "Social Media": (
        "Built a dynamic social media application using {techs}. Engineered real-time messaging, "
        "content sharing, and user engagement features with scalable architecture. Implemented "
        "robust notification system and optimized database performance for seamless user "
        "interactions."
    ),
    "AI/ML": (
        "Created an intelligent AI-powered solution leveraging {techs}. Implemented machine learning "
        "algorithms, data processing pipelines, and predictive analytics for actionable insights. "
        "Developed automated model training pipeline and achieved high accuracy in prediction tasks."
    ),
    "Mobile App": (
        "Developed a cross-platform mobile application using {techs}. Designed intuitive user "
        "interfaces, offline functionality, and optimized performance for mobile devices. "
        "Successfully deployed to app stores with positive user ratings and minimal crash reports."
    ),
    "Web App": (
        "Architected and deployed a responsive web application with {techs}. Focused on user "
        "experience, performance optimization, and scalable backend integration. Implemented "
        "progressive web app features and ensured cross-browser compatibility."
    ),
    "Dashboard": (
        "Engineered a comprehensive analytics dashboard using {techs}. Visualized complex data, "
        "implemented real-time updates, and created actionable business intelligence tools. "
        "Developed interactive charts and customizable reporting features."
    ),
    "General": (
        "Developed {name} utilizing technologies including {techs}. Focused on delivering "
        "high-quality solutions with attention to user experience, technical excellence, and "
        "scalable architecture. Implemented best practices and modern development methodologies "
        "throughout the project lifecycle."
    ),
}

PROJECT_OUTCOMES: dict[str, tuple[str, ...]] = {
    "E-commerce": (
        "Increased conversion rates by 25% through optimized user flow",
        "Reduced page load time by 40% improving user experience",
        "Successfully processed 1000+ transactions with zero errors",
    ),
    "Social Media": (
        "Achieved 500+ active users within first month of launch",
        "Implemented real-time messaging with 99.9% uptime",
        "Reduced server response time by 60% through optimization",
    ),
    "AI/ML": (
        "Achieved 92% accuracy in predictive modeling",
        "Processed 1M+ data points with automated pipeline",
        "Reduced manual analysis time by 80% through automation",
    ),
    "Mobile App": (
        "Achieved 4.8-star rating with 10K+ downloads",
        "Optimized battery usage resulting in 30% longer device life",
        "Successfully deployed to both iOS and Android platforms",
    ),
    "Web App": (
        "Improved user engagement by 45% with intuitive design",
        "Achieved 99.5% uptime with robust error handling",
        "Reduced bounce rate by 35% through performance optimization",
    ),
    "Dashboard": (
        "Enabled data-driven decisions reducing analysis time by 70%",
        "Visualized 10K+ data points with real-time updates",
        "Improved team productivity by 40% with actionable insights",
    ),
    "General": (
        "Successfully delivered project on time and within budget",
        "Met all specified requirements and exceeded expectations",
        "Demonstrated technical proficiency and problem-solving skills",
    ),
}

ACHIEVEMENT_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Certification", ("certified", "certification")),
    ("Award", ("award", "recognition", "employee")),
    ("Leadership", ("leadership", "lead", "manager")),
    ("Technical", ("hackathon", "project", "technical")),
    ("Academic", ("dean", "scholar", "academic")),
)

ACHIEVEMENT_DESCRIPTIONS: dict[str, str] = {
    "Certification": (
        "Successfully achieved {title} demonstrating expertise and commitment to professional "
        "development. Validated advanced skills through comprehensive examination and practical "
        "application. This certification confirms proficiency in industry best practices and "
        "cutting-edge technologies relevant to modern workplace demands."
    ),
    "Award": (
        "Recognized with {title} for outstanding performance and significant contributions to the "
        "organization. This honor reflects exceptional dedication to excellence, innovation, and "
        "consistent delivery of high-quality results. Selected among peers for demonstrating "
        "leadership qualities and going beyond expectations."
    ),
    "Leadership": (
        "Demonstrated exceptional leadership abilities earning {title}. Successfully guided "
        "cross-functional teams, drove strategic initiatives, and delivered measurable results "
        "through visionary planning and effective execution. Fostered collaborative environment "
        "and mentored team members to achieve collective goals."
    ),
    "Technical": (
        "Achieved {title} showcasing advanced technical proficiency and innovative problem-solving "
        "capabilities. Applied cutting-edge solutions to complex challenges, resulting in improved "
        "system performance, reduced costs, or enhanced user experience. Demonstrated mastery of "
        "modern technologies and best practices."
    ),
    "Academic": (
        "Earned {title} through academic excellence and scholarly achievement. Demonstrated strong "
        "analytical abilities, intellectual curiosity, and dedication to learning. This "
        "accomplishment reflects deep understanding of subject matter and ability to apply "
        "theoretical knowledge to practical scenarios."
    ),
    "General": (
        "Achieved {title} through dedication, skill development, and consistent performance. This "
        "accomplishment demonstrates commitment to excellence, continuous learning, and the ability "
        "to deliver outstanding results in challenging environments. Recognized for valuable "
        "contributions and positive impact on organizational objectives."
    ),
}

POSITION_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Frontend Developer", ("frontend", "front-end", "ui", "ux")),
    ("Backend Developer", ("backend", "back-end", "server", "api")),
    ("Software Engineer", ("software", "developer", "engineer")),
    ("Product Manager", ("product", "manager")),
)

EXPERIENCE_ACHIEVEMENTS: dict[str, tuple[str, ...]] = {
    "Software Engineer": (
        "Developed and deployed production-ready code following best practices",
        "Collaborated in agile teams to deliver features on schedule",
        "Optimized application performance improving user experience",
        "Participated in code reviews ensuring quality standards",
    ),
    "Frontend Developer": (
        "Built responsive user interfaces with modern frameworks",
        "Improved website performance and accessibility standards",
        "Collaborated with UX teams to implement design systems",
        "Developed reusable components following best practices",
    ),
    "Backend Developer": (
        "Designed and implemented RESTful APIs and microservices",
        "Optimized database queries improving system performance",
        "Ensured system security and data protection protocols",
        "Managed cloud infrastructure and deployment pipelines",
    ),
    "Product Manager": (
        "Led product strategy and roadmap development",
        "Conducted user research and market analysis",
        "Collaborated with cross-functional teams for product delivery",
        "Defined product requirements and success metrics",
    ),
    "General": (
        "Successfully contributed to {position} responsibilities",
        "Collaborated effectively with team members",
        "Demonstrated problem-solving skills",
    ),
}

COURSE_SUMMARIES: dict[str, dict[str, str]] = {
    "Computer Science": {
        "Software Engineer": (
            "Completed rigorous coursework in software engineering principles, algorithms, data "
            "structures, and system design. Developed strong foundation in programming languages, "
            "database management, and software development methodologies. Gained hands-on "
            "experience through lab sessions and collaborative projects focusing on scalable "
            "application development."
        ),
        "Frontend Developer": (
            "Focused on web development, user interface design, and interactive systems. Studied "
            "JavaScript frameworks, responsive design principles, and modern frontend technologies. "
            "Completed projects emphasizing user experience design, accessibility standards, and "
            "performance optimization for web applications."
        ),
        "Backend Developer": (
            "Specialized in server-side architecture, database systems, and API development. "
            "Completed coursework in distributed systems, cloud computing, and backend "
            "optimization. Gained practical experience in building scalable server solutions and "
            "managing complex data infrastructures."
        ),
        "Data Scientist": (
            "Emphasized statistical analysis, machine learning, and data visualization. Studied "
            "advanced mathematics, programming for data analysis, and predictive modeling "
            "techniques. Completed hands-on projects working with real datasets to extract "
            "actionable insights and build predictive models."
        ),
    },
    "Business Administration": {
        "Product Manager": (
            "Completed comprehensive business curriculum with focus on product strategy, market "
            "analysis, and project management. Developed skills in business intelligence, user "
            "research, and cross-functional leadership. Participated in case studies analyzing "
            "successful product launches and go-to-market strategies."
        ),
        "Software Engineer": (
            "Combined business acumen with technical foundation. Studied business process "
            "optimization, technology management, and strategic planning for tech organizations. "
            "Gained understanding of how technical solutions drive business value and competitive "
            "advantage."
        ),
    },
    "Information Technology": {
        "Software Engineer": (
            "Gained practical experience in system administration, network management, and IT "
            "infrastructure. Developed understanding of enterprise systems and technology "
            "operations. Completed hands-on labs focusing on system security, cloud deployment, "
            "and IT service management."
        ),
        "Backend Developer": (
            "Focused on infrastructure, cloud services, and system architecture. Studied DevOps "
            "principles, security protocols, and scalable system design. Acquired skills in "
            "managing complex IT environments and optimizing system performance."
        ),
    },
}

COURSE_SUMMARY_FALLBACK = (
    "Pursued {degree} in {field} with comprehensive curriculum covering foundational principles "
    "and practical applications. Developed analytical thinking, problem-solving abilities, and "
    "domain expertise relevant to {role} through coursework, projects, and collaborative "
    "learning experiences."
)

ROLE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "Software Engineer": ("javascript", "react", "node", "git", "api", "database", "html", "css"),
    "Frontend Developer": ("javascript", "react", "html", "css", "redux", "webpack", "responsive"),
    "Backend Developer": ("node", "express", "mongodb", "sql", "api", "rest", "graphql"),
    "Full Stack Developer": ("javascript", "react", "node", "express", "mongodb", "sql", "git"),
    "Data Scientist": ("python", "pandas", "numpy", "sql", "statistics", "machine learning", "visualization"),
    "Product Manager": ("roadmap", "stakeholder", "agile", "analytics", "user research", "prioritization"),
}

DEFAULT_KEYWORD_ROLE = "Software Engineer"
