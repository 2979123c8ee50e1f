"""Canonical annotation orders shipped with annorder.

Each tuple is ranked by position: an annotation must not follow one that
appears later in the same tuple. Groups are listed by the framework that
contributes them.
"""

from __future__ import annotations

ORDER_FOR_CLASS: tuple[str, ...] = (
    # Java
    "Deprecated",
    # Spring
    "Profile",
    "SpringBootApplication",
    "Controller", "RestController", "ControllerAdvice", "Service", "Component", "Configuration",
    "Aspect", "Converter",
    # JPA
    "Entity", "Embeddable",
    "Table",
    "IdClass",
    "BatchSize",
    "EntityListeners",
    "Audited",
    "AuditTable",
    # Test
    "Disabled",
    "ActiveProfiles",
    "ExtendWith",
    "SpringBootTest",
    "TestConfiguration",
    "Transactional",
    # Jackson
    "JsonSerialize",
    "JsonFormat",
    # Lombok
    "NoArgsConstructor", "AllArgsConstructor", "RequiredArgsConstructor",
    "Builder",
    "Getter", "Setter", "Data",
    "EqualsAndHashCode",
    "ToString",
    "Slf4j",
    # Checkstyle
    "StatelessCheck",
)

ORDER_FOR_INTERFACE: tuple[str, ...] = (
    # Spring
    "Repository",
    "FeignClient",
    # Lombok
    "Slf4j",
)

ORDER_FOR_METHOD: tuple[str, ...] = (
    # Java
    "Override",
    "Deprecated",
    "SuppressWarnings",
    # Spring
    "PreAuthorize",
    "GetMapping", "PostMapping", "PutMapping", "PatchMapping", "DeleteMapping",
    "ExceptionHandler",
    "ResponseStatus", "ResponseBody",
    "Around",
    "Async",
    "Cacheable",
    "Primary",
    "Bean",
    "ConfigurationProperties",
    # Validation
    "AssertTrue",
    # JUnit
    "Disabled",
    "WithMockUser", "WithUserDetails",
    "BeforeAll", "BeforeEach", "AfterAll", "AfterEach",
    "Test",
    # Scheduling
    "Scheduled",
    "SchedulerLock",
    # JPA
    "Transactional",
    "Modifying",
    "Query",
    "EntityGraph",
    # Jackson
    "JsonCreator",
    "JsonIgnore",
    # springdoc
    "Operation",
)

ORDER_FOR_FIELD: tuple[str, ...] = (
    # Java
    "Deprecated",
    "SuppressWarnings",
    # Spring
    "Value",
    "Qualifier",
    # Validation
    "NotNull", "NotBlank", "NotEmpty",
    "Size",
    "Min", "Max",
    "Email",
    # Test
    "LocalServerPort",
    "Spy",
    "InjectMocks",
    "Mock",
    # JPA
    "Embedded",
    "Id",
    "GeneratedValue",
    "Fetch",
    "OneToOne", "OneToMany", "ManyToOne",
    "CreatedDate", "CreatedBy", "LastModifiedDate", "LastModifiedBy",
    "Enumerated",
    "Convert",
    "Column", "JoinColumn",
    "Formula",
    "BatchSize",
    "Where",
    "OrderBy",
    # Jackson
    "JsonProperty",
    "JsonFormat",
    "JsonIgnore",
    # springdoc
    "Schema",
    # Lombok
    "Setter",
)

ORDER_FOR_PARAMETER: tuple[str, ...] = (
    # Validation
    "Valid",
    "NotNull",
    # Spring
    "PathVariable", "RequestParam", "RequestBody", "RequestPart", "ModelAttribute", "CookieValue",
    "PageableDefault", "SortDefault",
    "Qualifier",
    # JPA
    "Param",
    # Jackson
    "JsonProperty",
    # springdoc
    "ParameterObject", "AuthenticationPrincipal",
)

# Names on class declarations starting with these prefixes are deliberately
# left out of ORDER_FOR_CLASS and are not reported as unranked.
# TODO: rank the Spring Enable* family (EnableCaching, EnableScheduling, ...).
CLASS_UNRANKED_EXEMPT_PREFIXES: tuple[str, ...] = ("Enable",)
